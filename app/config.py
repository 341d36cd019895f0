import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel


class Settings(BaseModel):
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    resend_api_key: Optional[str] = None
    contact_email: Optional[str] = None
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"


def _split_origins(raw):
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def get_settings() -> Settings:
    """
    Ortamdan her çağrıda yeniden okunur; sonuç önbelleğe alınmaz.
    """
    load_dotenv()
    return Settings(
        supabase_url=os.getenv("SUPABASE_URL") or os.getenv("NEXT_PUBLIC_SUPABASE_URL"),
        supabase_key=os.getenv("SUPABASE_KEY") or os.getenv("NEXT_PUBLIC_SUPABASE_ANON_KEY"),
        resend_api_key=os.getenv("RESEND_API_KEY"),
        contact_email=os.getenv("CONTACT_EMAIL"),
        cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "*")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
