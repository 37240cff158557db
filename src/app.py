# ============================================================
# Etsy Description Writer FastAPI App
# ------------------------------------------------------------
# This app wires everything together:
#   - Input validation + keyword normalization
#   - DescriptionGenerator backed by OpenRouter
#   - JSON-file history of the latest descriptions
# ============================================================

import logging
from functools import lru_cache
from typing import List

from fastapi import Depends, FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

# --- Local imports ---
from src.settings import settings
from src.generate import DescriptionGenerator, GenerationRequest, OpenRouterClient
from src.storage import HistoryStore, ProductRecord

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

if not settings.OPENROUTER_API_KEY:
    logger.warning(
        "OPENROUTER_API_KEY is missing. Add it to your .env file to enable description generation."
    )

# ------------------------------------------------------------
# 🔧 Shared collaborators
# ------------------------------------------------------------
@lru_cache(maxsize=1)
def get_generator() -> DescriptionGenerator:
    model_client = OpenRouterClient(
        api_key=settings.OPENROUTER_API_KEY,
        model=settings.OPENROUTER_MODEL,
        base_url=settings.OPENROUTER_BASE_URL,
        timeout=settings.OPENROUTER_TIMEOUT_SEC,
        referer=settings.APP_REFERER,
        title=settings.APP_TITLE,
    )
    return DescriptionGenerator(model_client=model_client, max_tokens=settings.MAX_OUTPUT_TOKENS)

@lru_cache(maxsize=1)
def get_history_store() -> HistoryStore:
    return HistoryStore(settings.DATA_FILE, limit=settings.HISTORY_LIMIT)

# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
app = FastAPI(title="Etsy Description Writer API", version="0.1")

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    issues = ", ".join(err["msg"] for err in exc.errors())
    return JSONResponse(status_code=400, content={"message": issues})

# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
def format_keywords(value: str) -> str:
    return ", ".join(k.strip() for k in value.split(",") if k.strip())

class DescriptionRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    product_name: str
    product_details: str
    keywords: str

    @field_validator("product_name")
    @classmethod
    def check_name(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 3:
            raise PydanticCustomError("too_short", "Name is required")
        return v

    @field_validator("product_details")
    @classmethod
    def check_details(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 10:
            raise PydanticCustomError("too_short", "Details must be at least 10 characters")
        return v

    @field_validator("keywords")
    @classmethod
    def check_keywords(cls, v: str) -> str:
        if len(v.strip()) < 3 or not format_keywords(v):
            raise PydanticCustomError("too_short", "Provide at least one keyword")
        return format_keywords(v)

    def to_generation_request(self) -> GenerationRequest:
        return GenerationRequest(
            product_name=self.product_name,
            product_details=self.product_details,
            keywords=self.keywords,
        )

# ------------------------------------------------------------
# 📝 Descriptions
# ------------------------------------------------------------
@app.get("/api/descriptions", response_model=List[ProductRecord])
def list_descriptions(store: HistoryStore = Depends(get_history_store)):
    try:
        return store.list_records()
    except Exception:
        logger.exception("Failed to read stored descriptions")
        return JSONResponse(status_code=500, content={"message": "Failed to read stored descriptions"})

@app.post("/api/descriptions", response_model=ProductRecord)
async def create_description(
    req: DescriptionRequest,
    generator: DescriptionGenerator = Depends(get_generator),
    store: HistoryStore = Depends(get_history_store),
):
    try:
        description = await generator.generate(req.to_generation_request())
        record = ProductRecord(
            product_name=req.product_name,
            product_details=req.product_details,
            keywords=req.keywords,
            description=description,
            model=generator.model_client.model,
        )
        await run_in_threadpool(store.add, record)
        return record
    except Exception as e:
        logger.exception("Description generation failed")
        return JSONResponse(status_code=500, content={"message": str(e)})

# ------------------------------------------------------------
# 🧭 Health checks
# ------------------------------------------------------------
@app.get("/healthz")
def healthz():
    return {
        "ok": True,
        "env": settings.ENV,
        "debug": settings.DEBUG,
        "app": settings.app_name,
        "generation_enabled": bool(settings.OPENROUTER_API_KEY),
    }

@app.get("/health")
def health():
    return {"ok": True}

@app.get("/")
def hello():
    return {"message": f"{settings.app_name} service running."}
