# proptrack/models/base.py
"""Base commune des modèles exposés sur l'API"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Champs en snake_case côté Python/Supabase, en camelCase côté JSON.
    Les chaînes sont nettoyées (strip) avant validation.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )
