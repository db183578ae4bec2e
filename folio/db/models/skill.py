import enum

from sqlalchemy import Enum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from folio.db.base import Base


class SkillCategory(str, enum.Enum):
    HARD_SKILL = "HARD_SKILL"
    SOFT_SKILL = "SOFT_SKILL"


class Skill(Base):
    """A skill, ordered within its category."""

    __tablename__ = "skills"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    short_name: Mapped[str | None] = mapped_column(String(64), nullable=True)
    icon_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    category: Mapped[SkillCategory] = mapped_column(
        Enum(SkillCategory, name="skill_category"), nullable=False, index=True
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Badge gradient
    gradient_from: Mapped[str | None] = mapped_column(String(32), nullable=True)
    gradient_to: Mapped[str | None] = mapped_column(String(32), nullable=True)
    gradient_via: Mapped[str | None] = mapped_column(String(32), nullable=True)

    # Ordering field, scoped to category
    order: Mapped[int] = mapped_column(Integer, default=0, nullable=False, index=True)
