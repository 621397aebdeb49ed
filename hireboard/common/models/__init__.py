from .abstract import BaseModel, TimeStampedModel, CuserModel  # noqa
