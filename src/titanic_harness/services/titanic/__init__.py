"""Titanic gateway client."""

from titanic_harness.services.titanic.client import (
    TitanicApi,
    TitanicApiClient,
    access_token_from,
    created_id_from,
)

__all__ = ["TitanicApi", "TitanicApiClient", "access_token_from", "created_id_from"]
