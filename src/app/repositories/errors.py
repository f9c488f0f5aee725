class DuplicateKeyError(Exception):
    """Raised by repositories when an insert violates a unique constraint"""

    def __init__(self, table: str, fields: tuple):
        self.table = table
        self.fields = fields
        super().__init__(f"Duplicate key on {table} {fields}")
