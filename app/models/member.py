"""회원 SQLAlchemy ORM 모델 정의.

Member SQLAlchemy ORM model definition.

Tables:
    - members: 회원 (Member with an optional team assignment)
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.team import Team


class Member(Base):
    """회원 모델.

    Member model. Persisted on an explicit save; changes to a tracked
    instance are flushed by the session (dirty checking).

    Attributes:
        id: 자동 생성 식별자 (Generated integer identifier)
        username: 회원 이름 (Username, not unique)
        age: 나이 (Age)
        team_id: 소속 팀 FK (Team foreign key, nullable)

    Relationships:
        team: 소속 팀 (Many-to-one, loaded lazily unless a query eager-loads it)
    """

    __tablename__ = "members"

    # 회원 고유 식별자 — Member identifier (auto-increment)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 회원 이름 — Username (duplicates allowed)
    username: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    # 나이 — Age in years
    age: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # 소속 팀 FK — Team (SET NULL: 팀 삭제 시 소속 해제)
    team_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("teams.id", ondelete="SET NULL"), nullable=True
    )

    team = relationship("Team", back_populates="members")

    def __init__(self, username: str, age: int = 0, team: Team | None = None) -> None:
        self.username = username
        self.age = age
        self.team_id = None
        self.change_team(team)

    def change_team(self, team: Team | None) -> None:
        """소속 팀을 변경합니다.

        Move the member to another team (or none). back_populates keeps
        Team.members in sync without loading the collection.
        """
        self.team = team

    def __repr__(self) -> str:
        # team은 제외 — never touch the relationship here
        return f"Member(id={self.id}, username={self.username!r}, age={self.age})"
