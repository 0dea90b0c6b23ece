import logging

from fastapi import FastAPI

from .config import settings
from .feature_modules.transcribe.routes import router as transcribe_router

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

app = FastAPI(title="Bangla Transcribe", description="Audio upload -> Whisper transcript -> Bengali text.")

# CORS headers are set by the transcribe handler itself (including on OPTIONS),
# so no CORSMiddleware here: it would answer pre-flights with its own body.
app.include_router(transcribe_router)


@app.get("/healthz")
async def healthz():
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("bangla_transcribe.main:app", host=settings.app_host, port=settings.app_port)
