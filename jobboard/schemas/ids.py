"""Nominal identifier types.

All four are plain ``int`` at runtime; a type checker keeps them apart so a
``UserId`` cannot be passed where a ``ResumeId`` is expected.
"""
from typing import NewType

JobId = NewType("JobId", int)
ResumeId = NewType("ResumeId", int)
UserId = NewType("UserId", int)
CompanyId = NewType("CompanyId", int)
