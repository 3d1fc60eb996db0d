"""FastAPI application exposing sprint generation to the dashboard."""

from __future__ import annotations

from fastapi import FastAPI, HTTPException

from sprint_orchestrator import __version__
from sprint_orchestrator.api.models import SprintGenerationRequest, SprintGenerationResponse
from sprint_orchestrator.logging_utils import get_logger
from sprint_orchestrator.planning.models import SprintConfiguration
from sprint_orchestrator.planning.sprint_generator import generate_sprint_plan, summarize_plan


def create_app() -> FastAPI:
    """Create the FastAPI application."""
    app = FastAPI(title="Sprint Orchestrator API", version=__version__)
    logger = get_logger()

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/api/sprints/generate", response_model=SprintGenerationResponse)
    def generate_sprints(payload: SprintGenerationRequest) -> SprintGenerationResponse:
        try:
            config = SprintConfiguration(
                start_date=payload.config.start_date,
                sprint_length_weeks=payload.config.sprint_length_weeks,
                velocity_per_sprint=payload.config.velocity_per_sprint,
                assignment_mode=payload.config.assignment_mode,
            )
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        roster = [member.to_domain() for member in payload.team_members]
        sprints = generate_sprint_plan(
            [feature.to_domain() for feature in payload.features],
            roster,
            config,
        )
        summary = summarize_plan(sprints, roster)
        logger.info("API generated %d sprints", summary.sprint_count)
        return SprintGenerationResponse.model_validate(
            {
                "sprints": [sprint.to_dict() for sprint in sprints],
                "summary": summary.to_dict(),
            }
        )

    return app
