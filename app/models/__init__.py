# Models package
from app.models.base import Base
from app.models.resources import TaxonomyRecord

__all__ = ["Base", "TaxonomyRecord"]
