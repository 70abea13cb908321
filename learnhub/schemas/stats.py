# learnhub/schemas/stats.py
from learnhub.schemas.common import CamelModel


class Stats(CamelModel):
    users: int
    classes: int
    enrollments: int
