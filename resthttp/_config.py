from os import environ as env
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ._utils.constants import (
    ENV_ACCEPT,
    ENV_BASE_URL,
    ENV_PASSWORD,
    ENV_USERNAME,
    JSON_MEDIA_TYPE,
)
from .models.errors import BaseUrlMissingError


class HttpConfig(BaseModel):
    """Base configuration for an :class:`~resthttp.HttpClient`.

    Empty ``username`` or ``password`` means no authentication is applied.
    An empty ``accept`` falls back to ``application/json``.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str
    username: str = ""
    password: str = Field(default="", repr=False)
    accept: str = JSON_MEDIA_TYPE

    @field_validator("username", "password", mode="before")
    @classmethod
    def _empty_credentials(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("accept", mode="before")
    @classmethod
    def _default_accept(cls, value: Any) -> Any:
        return value or JSON_MEDIA_TYPE

    @property
    def has_credentials(self) -> bool:
        return self.username != "" and self.password != ""

    @classmethod
    def default(cls, base_url: str) -> "HttpConfig":
        return cls(base_url=base_url, username="", password="", accept=JSON_MEDIA_TYPE)

    @classmethod
    def from_env(
        cls,
        *,
        base_url: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        accept: Optional[str] = None,
    ) -> "HttpConfig":
        """Build a configuration from keyword arguments and the environment.

        A ``.env`` file in the working directory is loaded first; explicit
        arguments take precedence over ``RESTHTTP_*`` variables.

        Raises:
            BaseUrlMissingError: If no base URL is given or set in the environment.
        """
        load_dotenv()

        try:
            return cls(
                base_url=base_url or env.get(ENV_BASE_URL),  # type: ignore
                username=_explicit_or_env(username, ENV_USERNAME),
                password=_explicit_or_env(password, ENV_PASSWORD),
                accept=_explicit_or_env(accept, ENV_ACCEPT),
            )
        except ValidationError as e:
            for error in e.errors():
                if error["loc"] and error["loc"][0] == "base_url":
                    raise BaseUrlMissingError() from e
            raise


def _explicit_or_env(value: Optional[str], name: str) -> Optional[str]:
    # an explicit empty string still wins over the environment
    return value if value is not None else env.get(name)
