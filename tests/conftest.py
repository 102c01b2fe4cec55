# This project was developed with assistance from AI tools.
"""Fixtures for handler tests.

``app`` is a throwaway FastAPI application with the problem handlers
installed and a handful of routes that fail in known ways.
"""

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient
from pydantic import BaseModel

from problem_details.errors import ProblemDetailsError, bad_gateway, new, not_found_error
from problem_details.handlers import register_problem_handlers
from problem_details.schemas.error import ProblemDetails


class Payment(BaseModel):
    amount: int


def _build_app() -> FastAPI:
    app = FastAPI()
    register_problem_handlers(app)

    @app.get("/accounts/{account_id}")
    async def get_account(account_id: str):
        raise ProblemDetailsError(
            not_found_error(new(f"account {account_id} does not exist"), "Account not found")
        )

    @app.get("/upstream")
    async def upstream():
        problem = bad_gateway(new("ledger timed out"), "Ledger unavailable")
        raise ProblemDetailsError(problem.with_type("https://example.com/problems/ledger"))

    @app.get("/forbidden")
    async def forbidden():
        raise HTTPException(status_code=403, detail="Not allowed")

    @app.get("/unauthorized")
    async def unauthorized():
        raise HTTPException(
            status_code=401, detail="Token expired", headers={"WWW-Authenticate": "Bearer"}
        )

    @app.get("/empty-problem")
    async def empty_problem():
        raise ProblemDetailsError(None)

    @app.get("/statusless")
    async def statusless():
        raise ProblemDetailsError(ProblemDetails(title="Unclassified", detail="no status set"))

    @app.get("/informational")
    async def informational():
        raise ProblemDetailsError(ProblemDetails(status=204, title="Nothing"))

    @app.post("/payments")
    async def create_payment(payment: Payment):
        return {"amount": payment.amount}

    @app.get("/boom")
    async def boom():
        raise RuntimeError("database password is hunter2")

    return app


@pytest.fixture
def app():
    return _build_app()


@pytest.fixture
def client(app):
    # Starlette re-raises after the catch-all handler responds
    return TestClient(app, raise_server_exceptions=False)
