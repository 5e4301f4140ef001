from pydantic import BaseModel, Field
from typing import Dict, List, Literal, Set

ElementType = Literal["function", "class", "interface", "comment"]


def make_element_id(file_path: str, name: str) -> str:
    """Element ids are the owning file path and the element name joined by ':'."""
    return f"{file_path}:{name}"


class ElementSpec(BaseModel):
    """
    One element of a file as supplied to a reindex pass.
    """
    element_type: ElementType
    name: str
    content: str


class CodeElement(BaseModel):
    """
    Represents an indexed code element (function, class, interface or comment).
    """
    id: str
    file_path: str
    element_type: ElementType
    name: str
    content: str
    embedding: List[float] = Field(default_factory=list)
    keywords: Set[str] = Field(default_factory=set)


class SearchResult(BaseModel):
    """
    Represents a search hit returned by keyword, semantic or hybrid search.
    """
    id: str
    file_path: str
    name: str
    type: ElementType
    relevance: float
    highlights: List[str] = Field(default_factory=list)


class IndexStats(BaseModel):
    """
    Aggregate statistics for an index.
    """
    total_embeddings: int
    total_keywords: int
    files_indexed: int
    element_types: Dict[str, int] = Field(default_factory=dict)


class ReindexReport(BaseModel):
    """
    Summary of a reindex pass over a set of files.
    """
    reindexed: List[str] = Field(default_factory=list)
    skipped: List[str] = Field(default_factory=list)
    removed: List[str] = Field(default_factory=list)
    elapsed_time: float = 0.0
