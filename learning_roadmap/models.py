"""
Pydantic models for the roadmap request form.

Option values are what gets substituted into the prompt; labels are what the
form page shows.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class LabeledEnum(str, Enum):
    """String enum whose members carry a display label."""

    def __new__(cls, value: str, label: str):
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.label = label
        return obj

    @classmethod
    def choices(cls) -> list[tuple[str, str]]:
        return [(member.value, member.label) for member in cls]


class ExperienceLevel(LabeledEnum):
    JUNIOR = ("Junior (1-3년)", "주니어 (1~3년)")
    MIDDLE = ("Middle (4-7년)", "미들 (4~7년)")
    SENIOR = ("Senior (8년+)", "시니어 (8년 이상)")
    MANAGER = ("Manager/Lead", "매니저/팀장")
    STUDENT = ("Student/Newbie", "취준생/신입")


class DigitalSkill(LabeledEnum):
    LOW = ("Low", "낮음 (엑셀 기초 정도)")
    NORMAL = ("Normal", "보통 (업무 툴 원활)")
    HIGH = ("High", "높음 (새로운 툴 습득 빠름)")


class ProgrammingSkill(LabeledEnum):
    NONE = ("None", "없음 (No Code)")
    BASIC = ("Basic", "기초 (HTML/SQL 조금)")
    INTERMEDIATE = ("Intermediate", "중급 (스크립트 작성 가능)")
    ADVANCED = ("Advanced", "고급 (전문 개발자)")


class AISkill(LabeledEnum):
    NONE = ("None", "없음")
    BEGINNER = ("Beginner", "초급 (ChatGPT 질문 정도)")
    INTERMEDIATE = ("Intermediate", "중급 (프롬프트 튜닝/API 사용)")


class RoadmapForm(BaseModel):
    """Current values of the roadmap request form."""

    model_config = ConfigDict(frozen=True, use_enum_values=False)

    company: str = Field(default="", description="Company/organization (optional)")
    role: str = Field(default="", description="Job role, required to generate")
    experience: ExperienceLevel = ExperienceLevel.JUNIOR
    skill_digital: DigitalSkill = DigitalSkill.NORMAL
    skill_programming: ProgrammingSkill = ProgrammingSkill.NONE
    skill_ai: AISkill = AISkill.BEGINNER
    duration_total: str = "4 Weeks"
    duration_weekly: str = "5 Hours"
    goals: str = Field(default="", description="Learning goals")
    constraints: str = Field(default="", description="Other constraints (optional)")

    @property
    def has_role(self) -> bool:
        return bool(self.role.strip())


class RoadmapFormUpdate(BaseModel):
    """Partial form update; unset fields are left unchanged."""

    company: str | None = None
    role: str | None = None
    experience: ExperienceLevel | None = None
    skill_digital: DigitalSkill | None = None
    skill_programming: ProgrammingSkill | None = None
    skill_ai: AISkill | None = None
    duration_total: str | None = None
    duration_weekly: str | None = None
    goals: str | None = None
    constraints: str | None = None


FORM_FIELDS = tuple(RoadmapForm.model_fields)
