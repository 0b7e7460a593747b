from enum import Enum

from pydantic import BaseModel


class LootgenBaseModel(BaseModel):
    def to_dict(self):
        result = {}
        for key, value in vars(self).items():
            if isinstance(value, LootgenBaseModel):
                result[key] = value.to_dict()
            elif isinstance(value, list):
                result[key] = [
                    item.to_dict() if isinstance(item, LootgenBaseModel) else item
                    for item in value
                ]
            elif isinstance(value, Enum):
                result[key] = value.value
            else:
                result[key] = value
        return result

    class Config:
        from_attributes = True
