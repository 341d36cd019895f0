# backend/routes/contact.py

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from fastapi.concurrency import run_in_threadpool

from app.config import get_settings
from app.handler import SubmissionHandler
from app.store import SubmissionStore
from app.utils.email import EmailClient

router = APIRouter(prefix="/api", tags=["contact"])


def get_handler():
    # Her istek için yeni ayar + istemciler (global singleton yok)
    settings = get_settings()
    store = SubmissionStore(settings.supabase_url, settings.supabase_key)
    email_client = EmailClient(settings.resend_api_key)
    return SubmissionHandler(store, email_client, settings)


@router.post("/contact")
async def submit_contact(request: Request, handler: SubmissionHandler = Depends(get_handler)):
    body = await request.body()
    # requests bloklayan bir istemci, event loop'u tutmasın
    result = await run_in_threadpool(handler.handle, body)
    return JSONResponse(content=result.payload, status_code=result.status_code)
