from fastapi import APIRouter

from infrastructure.services import FormatterContextDep, SettingsDep

router = APIRouter(tags=["System"])


@router.get("/version")
def get_version(settings: SettingsDep):
    """Get the version of the application."""
    return {"version": settings.GIT_SHA}


@router.get("/health")
def get_health(context: FormatterContextDep):
    """Healthcheck endpoint."""
    return {
        "status": "ok",
        "message": context.t("system.health_ok", default_message="Service is healthy"),
    }
