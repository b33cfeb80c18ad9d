from typing import Annotated, Any

from pydantic import Field


JSONObject = dict[str, Any]
JSONList = list["JSONAny"]
JSONAny = JSONObject | JSONList | str | int | float | bool | None

# ASCII digits only, `\d` would also accept other Unicode digits
DIGITS_PATTERN = r"^[0-9]+$"

Snowflake = Annotated[str, Field(pattern=DIGITS_PATTERN)]
"""Provider-generated numeric string identifier. Never parsed locally."""
