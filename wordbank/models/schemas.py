"""
Hobby Word Bank API -- Pydantic Data Models

Every request and response body is defined here. Field names are snake_case
in Python and camelCase on the wire (oldWord, deletedWord, expiresIn, ...);
aliases take care of the mapping in both directions.

Request fields are all optional at the schema level. Missing and empty
values are rejected by the routes with a 400 and a specific message
instead of FastAPI's generic 422.
"""

from pydantic import BaseModel, ConfigDict, Field


class _Body(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ErrorResponse(_Body):
    """Body of every failed request."""

    error: str = Field(
        description="Human-readable reason for the failure.",
        examples=["Hobby not found"],
    )


# ---------------------------------------------------------------------------
# /hobby/{type} -- Word lists
# ---------------------------------------------------------------------------

class WordRequest(_Body):
    """Body for adding or deleting a word."""

    word: str | None = Field(
        default=None,
        description="The word. Compared ignoring case and whitespace, stored as sent.",
        examples=["마인크래프트"],
    )


class UpdateWordRequest(_Body):
    """Body for replacing one word with another, in place."""

    old_word: str | None = Field(
        default=None,
        alias="oldWord",
        description="Word to replace (matched ignoring case and whitespace).",
        examples=["마크"],
    )
    new_word: str | None = Field(
        default=None,
        alias="newWord",
        description="Replacement word. Must not duplicate another word in the category.",
        examples=["마인크래프트"],
    )


class HobbyWords(_Body):
    """A category and its words, in insertion order."""

    hobby: str = Field(description="Category name.", examples=["game"])
    words: list[str] = Field(description="Words in insertion order.", examples=[["마인크래프트"]])


class WordAdded(HobbyWords):
    message: str = Field(examples=["Word added"])


class WordDeleted(HobbyWords):
    message: str = Field(examples=["Word deleted"])
    deleted_word: str = Field(
        alias="deletedWord",
        description="The stored form of the removed word.",
        examples=["마인크래프트"],
    )


class WordUpdated(HobbyWords):
    message: str = Field(examples=["Word updated"])
    old_word: str = Field(alias="oldWord", examples=["마크"])
    new_word: str = Field(alias="newWord", examples=["마인크래프트"])


class ResetResponse(_Body):
    message: str = Field(examples=["Data reset to defaults"])
    data: dict[str, list[str]] = Field(description="The restored default bank.")


# ---------------------------------------------------------------------------
# /publish, /auth/* -- Access codes
# ---------------------------------------------------------------------------

class IssueRequest(_Body):
    master_code: str | None = Field(
        default=None,
        alias="masterCode",
        description="Master secret required to mint a code through the gated path.",
    )


class CodeIssued(_Body):
    """A freshly minted access code."""

    message: str = Field(examples=["Access code issued"])
    code: str = Field(description="The access code.", examples=["9f2c4e1ab07d3356"])
    expires_in: str = Field(
        alias="expiresIn",
        description="How long the code stays valid.",
        examples=["24 hours"],
    )


class VerifyCodeRequest(_Body):
    code: str | None = Field(default=None, description="Access code to verify.")


class CodeVerified(_Body):
    """Session marker the client should store after a successful verify."""

    valid: bool = Field(examples=[True])
    message: str = Field(examples=["Code verified"])
    session_key: str = Field(
        alias="sessionKey",
        description="Name under which the client stores the session value.",
        examples=["hobby_session"],
    )
    session_value: str = Field(
        alias="sessionValue",
        description="Session value to present to /auth/session.",
    )


class SessionRequest(_Body):
    session_value: str | None = Field(default=None, alias="sessionValue")


class SessionVerified(_Body):
    valid: bool = Field(examples=[True])
    message: str = Field(examples=["Session valid"])


class RevokeRequest(_Body):
    master_code: str | None = Field(default=None, alias="masterCode")
    code: str | None = Field(default=None, description="Access code to revoke.")


class CodeRevoked(_Body):
    message: str = Field(examples=["Code revoked"])
    code: str


# ---------------------------------------------------------------------------
# /health
# ---------------------------------------------------------------------------

class HealthResponse(_Body):
    """Liveness plus a quick view of the in-memory state."""

    status: str = Field(examples=["healthy"])
    version: str = Field(examples=["1.0.0"])
    categories: int = Field(description="Number of word categories.")
    codes: int = Field(description="Number of live access codes.")
    word_store_diverged: bool = Field(
        alias="wordStoreDiverged",
        description="True if the last word bank write failed.",
    )
    code_registry_diverged: bool = Field(
        alias="codeRegistryDiverged",
        description="True if the last codes write failed.",
    )
