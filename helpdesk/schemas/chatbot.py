from typing import Optional

from pydantic import BaseModel


class WidgetTheme(BaseModel):
    welcome_message: Optional[str] = None
    icon: Optional[str] = None
    text_color: Optional[str] = None
    background: Optional[str] = None


class ChatbotConfig(BaseModel):
    helpdesk_enabled: bool
    domain_name: str
    widget_theme: Optional[WidgetTheme] = None
