"""Character resource endpoints."""

from __future__ import annotations

from fastapi import Body, Depends, Path, Request, Response, status
from fastapi.exceptions import RequestValidationError

from app.api.deps import get_character_service
from app.schemas.character import Character
from app.services.characters import CharacterService


async def character_body(
    request: Request,
    character: Character | None = Body(None, description="Character data"),
) -> Character:
    """Decode the request body; a JSON ``null`` body decodes to an empty character."""

    if character is not None:
        return character
    if not (await request.body()).strip():
        raise RequestValidationError(
            [{"type": "missing", "loc": ("body",), "msg": "Field required", "input": None}]
        )
    return Character()


def list_characters(service: CharacterService = Depends(get_character_service)) -> list[Character]:
    return service.list_characters()


def create_character(
    character: Character = Depends(character_body),
    service: CharacterService = Depends(get_character_service),
) -> Character:
    return service.create_character(character)


def get_character(
    id: str = Path(..., description="Character ID"),
    service: CharacterService = Depends(get_character_service),
) -> Character:
    return service.get_character(id)


def update_character(
    id: str = Path(..., description="Character ID"),
    character: Character = Depends(character_body),
    service: CharacterService = Depends(get_character_service),
) -> Character:
    return service.update_character(id, character)


def delete_character(
    id: str = Path(..., description="Character ID"),
    service: CharacterService = Depends(get_character_service),
) -> Response:
    service.delete_character(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
