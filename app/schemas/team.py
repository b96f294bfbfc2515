"""팀 관련 Pydantic 요청/응답 스키마 정의.

Team Pydantic request/response schema definitions.
"""

from pydantic import BaseModel, Field

from app.schemas.member import MemberResponse


class TeamCreate(BaseModel):
    """팀 생성 요청 스키마 (Team creation request)."""

    name: str = Field(min_length=1, max_length=255)  # 팀 이름 (Team name)


class TeamUpdate(BaseModel):
    """팀 수정 요청 스키마 (Team update request, partial)."""

    name: str | None = Field(default=None, min_length=1, max_length=255)


class TeamResponse(BaseModel):
    """팀 응답 스키마.

    Team response schema.

    Attributes:
        id: 팀 ID (Team identifier)
        name: 팀 이름 (Team name)
    """

    id: int
    name: str


class TeamDetailResponse(TeamResponse):
    """팀 상세 응답 스키마 — 소속 회원 포함 (Team with its members)."""

    members: list[MemberResponse] = []
