from pydantic import BaseModel


class WebhookSetupPayload(BaseModel):
    url: str
    drop_pending_updates: bool = False
