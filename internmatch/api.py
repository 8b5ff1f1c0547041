"""HTTP surface for skill label resolution.

Run with: uvicorn --factory internmatch.api:create_app
"""
import logging
import secrets
from typing import Any, Optional

from fastapi import Depends, FastAPI, Header, HTTPException
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from config.settings import settings
from internmatch.exceptions import SkillLookupError
from internmatch.logging_config import setup_logging
from internmatch.matching.weights import MATCHING_VERSION
from internmatch.skills import SkillCatalog, SkillResolver, SqlSkillCatalog

logger = logging.getLogger(__name__)


class SkillNormalizeRequest(BaseModel):
    """Request body: ``{"skills": [...]}``; non-string entries are dropped.

    A body that is not a JSON object is read as an empty request.
    """

    skills: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def coerce_non_object(cls, data: Any):
        return data if isinstance(data, (dict, BaseModel)) else {}

    @field_validator("skills", mode="before")
    @classmethod
    def drop_non_strings(cls, v: Any):
        if not isinstance(v, list):
            return []
        return [item for item in v if isinstance(item, str)]


class SkillNormalizeResponse(BaseModel):
    """Response body: ``{"skillIds": [...], "unknown": [...]}``."""

    model_config = ConfigDict(populate_by_name=True)

    skill_ids: list[str] = Field(default_factory=list, alias="skillIds")
    unknown: list[str] = Field(default_factory=list)


def create_app(
    catalog: Optional[SkillCatalog] = None,
    api_key: Optional[str] = None,
) -> FastAPI:
    """
    Build the API application.

    Args:
        catalog: Skill catalog backend (defaults to the SQL catalog)
        api_key: Expected X-API-Key value (defaults to settings.api_key)

    Returns:
        Configured FastAPI application
    """
    setup_logging()

    if catalog is None:
        from internmatch.persistence.database import SessionLocal

        catalog = SqlSkillCatalog(SessionLocal)

    resolver = SkillResolver(catalog)
    expected_key = api_key if api_key is not None else settings.api_key

    app = FastAPI(title="Internmatch", version=MATCHING_VERSION)

    def require_api_key(x_api_key: Optional[str] = Header(default=None)) -> str:
        """Identity is established upstream; only the shared key is checked here."""
        if not expected_key or not x_api_key or not secrets.compare_digest(
            x_api_key.encode("utf-8"), expected_key.encode("utf-8")
        ):
            raise HTTPException(status_code=401, detail="Unauthorized")
        return x_api_key

    @app.get("/health")
    def health():
        return {"status": "ok", "matching_version": MATCHING_VERSION}

    @app.post(
        "/api/skills/normalize",
        response_model=SkillNormalizeResponse,
        response_model_by_alias=True,
    )
    async def normalize_skills(
        payload: Optional[SkillNormalizeRequest] = None,
        _: str = Depends(require_api_key),
    ):
        try:
            resolution = await resolver.resolve(payload.skills if payload else [])
        except SkillLookupError as e:
            logger.warning("Skill normalization unavailable: %s", e)
            raise HTTPException(status_code=503, detail="Skill catalog unavailable") from e

        return SkillNormalizeResponse(
            skill_ids=list(resolution.skill_ids),
            unknown=list(resolution.unknown),
        )

    return app
