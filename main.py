from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from config import CORS_ALLOW_ORIGINS, ENGINE_VERSION, LOG_LEVEL
from eligibility.routes import router as eligibility_router

logging.basicConfig(level=LOG_LEVEL)
logging.info(f"App starting with eligibility engine {ENGINE_VERSION}")

app = FastAPI(title="Study Visa Eligibility", version=ENGINE_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(eligibility_router)


@app.get("/health", tags=["meta"], summary="Health check")
def health():
    return {"status": "ok"}
