"""
API Server Router - HTTP access to a FormStore.

This module provides the FastAPI application that lists, reads and writes
form definitions through a single FormStore instance.
"""

from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException, Response
from pydantic import BaseModel

from ..errors import (
    CodecError,
    FormNotFoundError,
    PersistenceManagerError,
)
from ..store import FormStore


# Pydantic models for API
class SaveRequest(BaseModel):
    """Request body for saving a form; the definition is stored as sent."""
    definition: Dict[str, Any]


class SaveResponse(BaseModel):
    """Response for saving a form."""
    success: bool
    message: str


class FormEntry(BaseModel):
    """Entry in the form listing."""
    identifier: str
    name: str
    persistenceIdentifier: str


class FormListResponse(BaseModel):
    """Response for form listing."""
    forms: List[FormEntry]
    total: int


class FormResponse(BaseModel):
    """Response for a single form."""
    persistenceIdentifier: str
    definition: Dict[str, Any]


def _error_status(error: PersistenceManagerError) -> int:
    if isinstance(error, FormNotFoundError):
        return 404
    if isinstance(error, CodecError):
        return 422
    return 500


def _http_error(error: PersistenceManagerError) -> HTTPException:
    return HTTPException(status_code=_error_status(error), detail=error.to_dict())


def create_app(store: FormStore) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        store: The FormStore to serve. Built once at startup and shared by
               all requests.

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="formstore API",
        description="Read and write YAML form definitions",
        version="0.1.0",
    )

    app.state.store = store

    @app.get("/health")
    def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/forms", response_model=FormListResponse)
    def list_forms():
        """
        List all enabled forms.
        """
        try:
            forms = app.state.store.list_forms()
        except PersistenceManagerError as e:
            raise _http_error(e)

        entries = [FormEntry(**form.to_dict()) for form in forms]
        return FormListResponse(forms=entries, total=len(entries))

    @app.get("/forms/{persistence_identifier}", response_model=FormResponse)
    def get_form(persistence_identifier: str):
        """Load a single form definition."""
        try:
            definition = app.state.store.load(persistence_identifier)
        except PersistenceManagerError as e:
            raise _http_error(e)

        if not isinstance(definition, dict):
            raise HTTPException(
                status_code=422,
                detail={
                    "message": f'The form "{persistence_identifier}" is not a mapping.',
                    "code": CodecError.code,
                },
            )
        return FormResponse(
            persistenceIdentifier=persistence_identifier,
            definition=definition,
        )

    @app.head("/forms/{persistence_identifier}")
    def form_exists(persistence_identifier: str):
        """200 if the form exists, 404 otherwise."""
        try:
            found = app.state.store.exists(persistence_identifier)
        except PersistenceManagerError as e:
            raise _http_error(e)
        return Response(status_code=200 if found else 404)

    @app.put("/forms/{persistence_identifier}", response_model=SaveResponse)
    def save_form(persistence_identifier: str, request: SaveRequest):
        """
        Create or overwrite a form definition.
        """
        definition = request.definition
        if not definition.get("identifier"):
            raise HTTPException(
                status_code=422,
                detail={
                    "message": f'The form "{persistence_identifier}" has no identifier.',
                    "code": CodecError.code,
                },
            )

        try:
            app.state.store.save(persistence_identifier, definition)
        except PersistenceManagerError as e:
            raise _http_error(e)

        return SaveResponse(
            success=True,
            message=f"Saved {definition['identifier']} as {persistence_identifier}",
        )

    return app
