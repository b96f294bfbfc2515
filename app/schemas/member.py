"""회원 관련 Pydantic 요청/응답 스키마 정의.

Member Pydantic request/response schema definitions,
including the MemberDto query projection.
"""

from pydantic import BaseModel, ConfigDict, Field


class MemberDto(BaseModel):
    """회원 조회 전용 프로젝션.

    Read-only projection of a member joined with its team.
    Built only from query results; never persisted.

    Attributes:
        id: 회원 ID (Member identifier)
        username: 회원 이름 (Username)
        team_name: 팀 이름, 조인 없이 변환한 경우 None
                   (Team name; None when mapped without the join)
    """

    model_config = ConfigDict(frozen=True)

    id: int
    username: str
    team_name: str | None = None


class MemberCreate(BaseModel):
    """회원 생성 요청 스키마.

    Member creation request schema.

    Attributes:
        username: 회원 이름 (Username)
        age: 나이 (Age, default 0)
        team_id: 소속 팀 ID (Optional team identifier)
    """

    username: str = Field(min_length=1, max_length=255)  # 회원 이름 (Username)
    age: int = Field(default=0, ge=0)  # 나이 (Age)
    team_id: int | None = None  # 소속 팀 ID (Team identifier, optional)


class MemberUpdate(BaseModel):
    """회원 수정 요청 스키마 (부분 업데이트).

    Member update request schema (partial update). Sending ``team_id: null``
    explicitly removes the member from its team.
    """

    username: str | None = Field(default=None, min_length=1, max_length=255)
    age: int | None = Field(default=None, ge=0)
    team_id: int | None = None


class MemberResponse(BaseModel):
    """회원 응답 스키마.

    Member response schema. ``team_name`` is filled only when the team was
    loaded together with the member.
    """

    id: int  # 회원 ID (Member identifier)
    username: str  # 회원 이름 (Username)
    age: int  # 나이 (Age)
    team_id: int | None = None  # 소속 팀 ID (Team identifier)
    team_name: str | None = None  # 소속 팀 이름 (Team name, if loaded)


class BulkAgePlusRequest(BaseModel):
    """벌크 나이 증가 요청 스키마 (Members with age >= ``age`` get +1)."""

    age: int = Field(ge=0)


class BulkAgePlusResponse(BaseModel):
    """벌크 나이 증가 응답 스키마 (Number of updated rows)."""

    updated: int
