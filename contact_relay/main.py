#run it with uvicorn contact_relay.main:app --reload
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contact_relay.api.api_router import api_router
from contact_relay.core.config import Settings, get_settings
from dotenv import load_dotenv
import logging

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# Load environment variables from .env file
load_dotenv()

app = FastAPI(title="Contact Relay", version="1.0.0")

# CORS setup
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)

@app.get("/api/health")
def health_check(settings: Settings = Depends(get_settings)):
    """
    Health check endpoint.

    Reports only whether each provider secret is present, never its value.
    """
    return {
        "status": "ok",
        "env_vars": {
            "turnstile_secret_key": bool(settings.turnstile_secret_key),
            "resend_api_key": bool(settings.resend_api_key),
        },
    }
