"""
Base models for API requests and responses.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema whose JSON field names are camelCase.
    
    Stored records and HTTP payloads share the same camelCase keys
    (``createdAt``, ``roleIds``, ``pageSize``); Python code uses snake_case.
    """
    
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        str_strip_whitespace=True,
    )
    
    def to_record(self) -> dict:
        """Serialize to the camelCase mapping written to the store and sent over HTTP."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
