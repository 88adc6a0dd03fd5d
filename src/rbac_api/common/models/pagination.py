"""
Pagination models for API responses.
"""
import math

from pydantic import Field

from .base import CamelModel


class PaginationParams(CamelModel):
    """Common pagination parameters."""
    page: int = Field(1, ge=1, description="Page number")
    page_size: int = Field(10, ge=1, description="Items per page")
    
    @property
    def offset(self) -> int:
        """Number of records to skip."""
        return (self.page - 1) * self.page_size
    
    @property
    def limit(self) -> int:
        """Maximum number of records on the page."""
        return self.page_size


class PaginationInfo(CamelModel):
    """Pagination block of a paginated envelope."""
    current_page: int = Field(description="Current page number")
    page_size: int = Field(description="Number of items per page")
    total_items: int = Field(description="Total number of items")
    total_pages: int = Field(description="Total number of pages")
    
    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages
    
    @property
    def has_previous(self) -> bool:
        return self.current_page > 1
    
    @classmethod
    def create(cls, page: int, page_size: int, total_items: int) -> "PaginationInfo":
        """Create pagination info; ``total_pages`` is ``ceil(total_items / page_size)``."""
        total_pages = math.ceil(total_items / page_size) if page_size > 0 else 0
        
        return cls(
            current_page=page,
            page_size=page_size,
            total_items=total_items,
            total_pages=total_pages
        )
