# Third-party imports
from pydantic import BaseModel

# Local application imports
from nagrik.models.base import Base


def apply_partial_update(model_instance: Base, update_data: BaseModel) -> list[str]:
    """
    Copy the fields the client actually sent onto ``model_instance`` (PATCH).

    Fields left out of the request are untouched; fields sent as null are cleared.
    Returns the names of the fields that were set.
    """
    fields_to_update = {
        k: v for k, v in update_data.model_dump(exclude_unset=True).items() if hasattr(model_instance, k)
    }
    for field, value in fields_to_update.items():
        setattr(model_instance, field, value)
    return list(fields_to_update)
