"""Logical sections located inside a posting's free-text body."""

from pydantic import BaseModel


class ContentSections(BaseModel):
    """Output of the section parser, input of the content assembler.

    List sections hold bullet items of 10-149 characters, at most 8 each.
    """
    overview: str = ""  # leftover text, max 200 chars
    responsibilities: list[str] = []
    requirements: list[str] = []
    skills: list[str] = []
    company_info: str = ""  # max 300 chars
    application_info: str = ""
    contact_info: str = ""

    def is_empty(self) -> bool:
        return not any((
            self.overview,
            self.responsibilities,
            self.requirements,
            self.skills,
            self.company_info,
            self.application_info,
            self.contact_info,
        ))
