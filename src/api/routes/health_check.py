from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

ROUTE_INDEX = "\n".join(
    [
        "GET  /healthz",
        "GET  /pages",
        "GET  /pages/{id}",
        "GET  /entities/{list}/{key}",
        "POST /entities/{list}/{key}   (admin session)",
        "PUT  /entities/{list}/{key}   (admin session)",
        "GET  /countries/{code}",
        "GET  /cities/{key}",
        "POST /admin/login",
        "POST /admin/logout            (admin session)",
        "GET  /admin/me",
    ]
)


@router.get("/healthz", response_class=PlainTextResponse)
async def health_check():
    return "ok"


@router.get("/", response_class=PlainTextResponse)
async def index():
    return ROUTE_INDEX + "\n"
