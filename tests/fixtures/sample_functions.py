"""Sample function app used by the CLI and integration tests."""

import logging
from enum import IntEnum
from typing import Annotated, Generic, TypeVar

from pydantic import BaseModel, Field

from func_swagger import (
    ActionResult,
    FromQuery,
    FunctionRegistry,
    HttpRequest,
    HttpTrigger,
    Inject,
    Required,
    Response,
)

T = TypeVar("T")


class Colour(IntEnum):
    RED = 1
    BLUE = 2


class Address(BaseModel):
    line1: str = Field(description="First address line", max_length=100)
    postcode: str = Field(pattern=r"^[A-Z0-9 ]+$", examples=["CV1 2WT"])


class Customer(BaseModel):
    customer_id: str = Field(description="Unique identifier", examples=["b8592ff8"])
    given_name: str = Field(min_length=1, max_length=100)
    age: int | None = None
    address: Address | None = None


class Page(BaseModel, Generic[T]):
    total: int
    value: T


class CustomerFilter(BaseModel):
    favourite_colour: Colour | None = None
    address: Address | None = None


class CustomerService:
    pass


registry = FunctionRegistry()


@registry.function(
    "GetCustomer",
    display_name="Get a customer",
    display_description="Returns a single customer by id.",
    responses=[
        Response(status_code=200, description="Customer found"),
        Response(status_code=404, description="Customer not found", show_schema=False),
    ],
)
def get_customer(
    req: Annotated[HttpRequest, HttpTrigger(methods=["get"], route="customers/{customer_id}")],
    customer_id: str,
    log: logging.Logger,
) -> Customer:
    raise NotImplementedError


@registry.function(
    "PostCustomer",
    responses=[Response(status_code=201, description="Customer created")],
    produces=Customer,
)
def post_customer(
    req: Annotated[HttpRequest, HttpTrigger(methods=["post"], route="customers/{customer_id}")],
    customer_id: str,
    customer: Customer,
    service: Annotated[CustomerService, Inject],
) -> ActionResult:
    raise NotImplementedError


@registry.function("SearchCustomers", responses=[Response(status_code=200, description="Matches")])
def search_customers(
    req: Annotated[HttpRequest, HttpTrigger(methods=["get"], route="customers")],
    colour: Annotated[Colour, FromQuery, Required],
    criteria: Annotated[CustomerFilter, FromQuery],
) -> list[Customer]:
    raise NotImplementedError


@registry.function("CountCustomers", responses=[Response(status_code=200, description="Count")])
def count_customers(
    req: Annotated[HttpRequest, HttpTrigger(methods=["get"], route="customers/count")],
) -> Page[int]:
    raise NotImplementedError


@registry.function("Swagger")
def swagger(req: Annotated[HttpRequest, HttpTrigger(methods=["get"], route="customers/api-definitions")]) -> ActionResult:
    raise NotImplementedError


@registry.function("Archive", disabled=True)
def archive(req: Annotated[HttpRequest, HttpTrigger(methods=["post"])]) -> None:
    raise NotImplementedError


@registry.function("Cleanup")
def cleanup(timer: str) -> None:
    raise NotImplementedError


duplicate_registry = FunctionRegistry()


@duplicate_registry.function("ListA")
def list_a(req: Annotated[HttpRequest, HttpTrigger(methods=["get"], route="things")]) -> None:
    raise NotImplementedError


@duplicate_registry.function("ListB")
def list_b(req: Annotated[HttpRequest, HttpTrigger(methods=["get"], route="things")]) -> None:
    raise NotImplementedError


unchecked_registry = FunctionRegistry()


@unchecked_registry.function("GetThing")
def get_thing(req: Annotated[HttpRequest, HttpTrigger(methods=["get"], route="things/{thing_id}")]) -> None:
    raise NotImplementedError
