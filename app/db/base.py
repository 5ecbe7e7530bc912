# Import all models so Base.metadata knows every table
from app.db.base_class import Base  # noqa: F401
from app.db.models.company import Company  # noqa: F401
from app.db.models.job import Job  # noqa: F401
