from pydantic import BaseModel


class WebhookInfo(BaseModel):
    """https://core.telegram.org/bots/api#webhookinfo"""
    url: str
    has_custom_certificate: bool
    pending_update_count: int
    ip_address: str | None = None
    last_error_date: int | None = None
    last_error_message: str | None = None
    last_synchronization_error_date: int | None = None
    max_connections: int | None = None
    allowed_updates: list[str] | None = None
