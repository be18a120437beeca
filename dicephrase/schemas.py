"""
Request schemas - where the words come from and what to build from them
"""

from enum import Enum
from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class EmbeddedList(str, Enum):
    """Word lists shipped with the package"""
    EN = "EN"  # Original Diceware English list
    FR = "FR"  # French list, ASCII spelling


class EmbeddedSource(BaseModel):
    """Use one of the embedded word lists"""
    model_config = ConfigDict(frozen=True)

    kind: Literal["embedded"] = "embedded"
    name: EmbeddedList = EmbeddedList.EN


class FileSource(BaseModel):
    """Use a word list file, one word per line"""
    model_config = ConfigDict(frozen=True)

    kind: Literal["file"] = "file"
    path: Path


WordSource = Annotated[Union[EmbeddedSource, FileSource], Field(discriminator="kind")]


class GenerationRequest(BaseModel):
    """Everything needed to generate one passphrase"""
    model_config = ConfigDict(frozen=True)

    source: WordSource = Field(default_factory=EmbeddedSource)
    # Zero passes here and is refused at generation time with its own error
    word_count: int = Field(..., ge=0, description="Number of words to generate")
    inject_special_char: bool = False
