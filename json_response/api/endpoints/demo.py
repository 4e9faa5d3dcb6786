from http import HTTPStatus

from fastapi import APIRouter

from json_response import (
    failure_response,
    failure_response_with_message,
    success_response,
    success_response_with_code,
)

router = APIRouter()

USERS = ["Alice", "John"]


@router.get("/users")
def list_users():
    # {"status":"success","code":200,"data":["Alice","John"]}
    return success_response(USERS)


@router.get("/users/accepted")
def accept_users():
    return success_response_with_code(HTTPStatus.ACCEPTED, USERS)


@router.get("/books")
def list_books():
    # {"status":"failed","code":500,"message":"Internal Server Error: Couldn't fetch book list from database"}
    return failure_response_with_message(
        HTTPStatus.INTERNAL_SERVER_ERROR,
        "Couldn't fetch book list from database",
    )


@router.get("/books/missing")
def missing_book():
    return failure_response(HTTPStatus.NOT_FOUND)


@router.get("/broken")
def broken():
    """Data with no JSON form; answered by the plain-text fallback handler."""
    return success_response({"ratio": float("nan")})
