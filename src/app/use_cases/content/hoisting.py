from typing import List, Optional, Tuple

from src.domain.entities import Entity


def hoist_canonical(
    entities: List[Entity], canonical_list: str
) -> Tuple[Optional[dict], List[dict]]:
    """
    Split out the first entity belonging to ``canonical_list``.

    Returns (that entity's document or None, every other document in order).
    """
    canonical = None
    rest = []
    for entity in entities:
        if canonical is None and entity.list_name == canonical_list:
            canonical = entity.to_document()
        else:
            rest.append(entity.to_document())
    return canonical, rest
