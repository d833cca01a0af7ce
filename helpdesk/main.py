from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from helpdesk.config import settings
from helpdesk.logging_config import setup_logging
from helpdesk.routers import chat_rooms, chatbot

setup_logging(settings.log_level)

app = FastAPI(
    title="Helpdesk Chatbot API",
    description="Conversation routing for the helpdesk chat widget",
    version="0.1.0",
)

cors_origins = [origin.strip() for origin in settings.cors_allow_origins.split(",") if origin.strip()]
if not cors_origins:
    cors_origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(chatbot.router)
app.include_router(chat_rooms.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
