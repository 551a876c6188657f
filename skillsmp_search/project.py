"""Project API responses into the minimal output printed by the CLI."""

import json
from dataclasses import asdict

from .errors import ApiLogicalError, MissingDataError
from .models import AiOutput, AiSkill, ApiResponse, Skill

UNKNOWN_ERROR = "Unknown error"


def project_skill(skill: Skill) -> AiSkill:
    # url comes from skill_url only; github_url is not a fallback
    return AiSkill(
        name=skill.name,
        author=skill.author,
        description=skill.description or "",
        stars=skill.stars or 0,
        url=skill.skill_url or "",
    )


def project(response: ApiResponse, query: str) -> AiOutput:
    """Build the output for ``query`` from a decoded response.

    Raises ApiLogicalError when the API reports ``success: false`` and
    MissingDataError when it sends no data otherwise.
    """
    if response.success is False:
        error = response.error
        message = error.message if error and error.message is not None else UNKNOWN_ERROR
        raise ApiLogicalError(message, code=error.code if error else None)

    data = response.data
    if data is None:
        raise MissingDataError("No data in response")

    return AiOutput(
        query=query,
        total_results=data.pagination.total,
        page=data.pagination.page,
        skills=[project_skill(s) for s in data.skills],
    )


def render(output: AiOutput) -> str:
    """Serialize the output as indented JSON."""
    return json.dumps(asdict(output), indent=2, ensure_ascii=False)
