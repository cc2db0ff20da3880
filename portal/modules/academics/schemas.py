from pydantic import BaseModel, Field
from typing import Optional, List


class BoardCreate(BaseModel):
    name: str = Field(min_length=1)

class ClassCreate(BaseModel):
    board_id: str
    name: str = Field(min_length=1)
    section: Optional[str] = None

class SubjectCreate(BaseModel):
    class_id: str
    name: str = Field(min_length=1)

class ChapterCreate(BaseModel):
    subject_id: str
    name: str = Field(min_length=1)

class TopicCreate(BaseModel):
    chapter_id: str
    name: str = Field(min_length=1)
    description: Optional[str] = None

class ClassOption(BaseModel):
    id: str
    name: str

class BoardClassesOption(BaseModel):
    id: str
    name: str
    classes: List[ClassOption] = []

class ChapterUpdate(BaseModel):
    name: str = Field(min_length=1)

class TopicUpdate(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
