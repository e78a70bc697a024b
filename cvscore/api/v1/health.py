from fastapi import APIRouter

from cvscore.core.config.scoring import get_scoring_value
from cvscore.lexicon import LEXICON_VERSION

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Report service status and the scoring config and lexicon versions in use.",
)
async def health_check():
    return {
        "status": "healthy",
        "scoring_config_version": int(get_scoring_value("version", 1)),
        "lexicon_version": LEXICON_VERSION,
    }
