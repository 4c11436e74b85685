"""
ScamShield - Scam & Phishing Message Analyzer API

This is the main entry point of our application.
It creates the FastAPI app and defines all the endpoints.

ENDPOINTS:
- POST /analyze : Analyze one message and return a verdict
- GET /         : Simple status check (used by the web client's host)
- GET /health   : Health check for Railway/Render

FLOW:
1. The web client sends {"message": "..."} to POST /analyze
2. We reject empty messages (400)
3. The heuristic scorer gives a rule score, matched phrases and scam type
4. The decision blender adds the sentiment signal (if available)
5. We return the verdict
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.models.schemas import AnalyzeRequest, AnalyzeResponse
from app.core.scam_detector import heuristic_scorer
from app.core.decision_blender import decision_blender
from app.core.sentiment_client import sentiment_client

# ===== Configure Logging =====
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"


# ===== Create FastAPI App =====

app = FastAPI(
    title="ScamShield",
    description="Detects phishing, investment fraud & WhatsApp pump scams",
    version=VERSION
)

# Add CORS middleware (allows requests from any origin)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ===== Exception Handler =====

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Anything that escapes an endpoint becomes a plain 500."""
    logger.error(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "Analysis failed"}
    )


# ===== Status Endpoints =====

@app.get("/")
async def root():
    return {
        "status": "OK",
        "message": "ScamShield Backend Running",
        "version": VERSION
    }


@app.get("/health")
async def health_check():
    """
    Health check endpoint for Railway/Render.

    They ping this endpoint to check if the service is running.
    """
    return {
        "status": "healthy",
        "service": "ScamShield",
        "version": VERSION,
        "sentimentEnabled": sentiment_client.enabled
    }


# ===== Analyze Endpoint =====

@app.post("/analyze", response_model=AnalyzeResponse)
async def analyze_endpoint(request: AnalyzeRequest):
    """
    Analyze a message for scam / phishing signals.

    Flow:
    1. Validate the message
    2. Heuristic scoring (always works, no network)
    3. Blend with sentiment (best effort, never fails the request)
    4. Return the verdict
    """
    # Step 1: Empty input is the caller's mistake, not an analysis failure
    if not request.message:
        return JSONResponse(
            status_code=400,
            content={"error": "Message is required"}
        )

    logger.info(f"Analyzing message: {request.message[:50]}...")

    try:
        # Step 2: Rule-based analysis
        analysis = heuristic_scorer.analyze(request.message)

        # Step 3: Final decision
        verdict = await decision_blender.blend(analysis, request.message)

    except Exception as e:
        logger.error(f"Analysis error: {e}")
        return JSONResponse(
            status_code=500,
            content={"error": "Analysis failed"}
        )

    return AnalyzeResponse.from_verdict(verdict)


# ===== Run the App =====

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=settings.PORT
    )
