"""Dicho use cases."""

from .list_dichos import ListDichosRequest, ListDichosResponse, ListDichosUseCase
from .submit_dicho import SubmitDichoRequest, SubmitDichoUseCase

__all__ = [
    "ListDichosRequest",
    "ListDichosResponse",
    "ListDichosUseCase",
    "SubmitDichoRequest",
    "SubmitDichoUseCase",
]
