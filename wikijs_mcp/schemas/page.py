"""
Schemas - Page Models

Pydantic models for Wiki.js page data.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any


class WikiTag(BaseModel):
    """Tag attached to a page; ``tag`` is the matching token."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    tag: str
    title: Optional[str] = None
    created_at: Optional[str] = Field(None, alias="createdAt")
    updated_at: Optional[str] = Field(None, alias="updatedAt")


class WikiPage(BaseModel):
    """Page as returned by the list, single and search projections."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    path: str
    title: str
    description: Optional[str] = None
    content: Optional[str] = None
    is_published: Optional[bool] = Field(None, alias="isPublished")
    is_private: Optional[bool] = Field(None, alias="isPrivate")
    locale: Optional[str] = None
    created_at: Optional[str] = Field(None, alias="createdAt")
    updated_at: Optional[str] = Field(None, alias="updatedAt")
    tags: Optional[List[WikiTag]] = None

    @property
    def tag_tokens(self) -> List[str]:
        return [t.tag for t in self.tags or []]


class ResponseResult(BaseModel):
    """Outcome block returned by every Wiki.js mutation."""
    model_config = ConfigDict(populate_by_name=True)

    succeeded: bool
    error_code: Optional[int] = Field(None, alias="errorCode")
    slug: Optional[str] = None
    message: Optional[str] = None


class PageUpdate(BaseModel):
    """Full field set required by the ``update`` mutation."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    content: str
    description: str
    locale: str
    path: str
    is_published: bool = Field(alias="isPublished")
    is_private: bool = Field(alias="isPrivate")
    editor: str
    tags: List[str]

    def to_variables(self) -> Dict[str, Any]:
        """GraphQL variables for UPDATE_PAGE."""
        return self.model_dump(by_alias=True)


class PageTreeNode(BaseModel):
    """Page hierarchy tree node."""
    path: str
    title: Optional[str] = None
    is_page: bool
    children: List["PageTreeNode"] = Field(default_factory=list)


# Allow recursive model
PageTreeNode.model_rebuild()
