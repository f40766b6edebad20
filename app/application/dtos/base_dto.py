# app/application/dtos/base_dto.py

"""
Base class for custom DTOs.

This module defines CustomBaseModel, which extends Pydantic's BaseModel
with behaviour shared by all application DTOs.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class CustomBaseModel(BaseModel):
    """
    Custom base model for all application DTOs.

    Reads attributes from plain objects (dataclasses, ORM rows) and drops
    fields whose value is None when dumped.
    """

    model_config = ConfigDict(from_attributes=True)

    def model_dump(self, *args, **kwargs) -> Dict[str, Any]:
        """
        Override Pydantic's model_dump to filter out fields with None values.

        Args:
            *args: Positional arguments passed to the original method
            **kwargs: Keyword arguments passed to the original method

        Returns:
            Dict[str, Any]: Dictionary of model attributes, excluding None values
        """
        d = super().model_dump(*args, **kwargs)
        return {k: v for k, v in d.items() if v is not None}
