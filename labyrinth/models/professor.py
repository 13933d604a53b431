"""Professor data model with research areas, lab profile and student preferences."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Professor(BaseModel):
    """Represents a faculty member who may take on research students.

    Attributes:
        id: Collaborator-assigned identifier
        title: Academic title (Professor, Research Professor, Principal Investigator, ...)
        department: Department name, used for GPA expectations
        research_areas: Research area labels
        required_skills: Skill labels expected from students
        lab_size: Number of lab members (negative values are treated as 0)
        mentorship_style: Free text containing style keywords (hands-on, independent, ...)
        preferred_student_level: Year-level labels the professor prefers
        looking_for_students: Professors not seeking students never appear in matches
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: Optional[str] = None
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    pronouns: str = ""
    ethnicity: str = ""
    university: str = ""
    department: str = ""
    title: str = ""
    research_areas: list[str] = Field(default_factory=list)
    publications: list[str] = Field(default_factory=list)
    funding_history: str = ""
    lab_size: int = 0
    mentorship_style: str = ""
    looking_for_students: bool = True
    required_skills: list[str] = Field(default_factory=list)
    preferred_student_level: list[str] = Field(default_factory=list)
    bio: str = ""
    website_url: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
