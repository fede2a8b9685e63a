from typing import List
from fastapi import APIRouter, Depends
from ..dependencies import get_key_store
from ..schemas.keys import (
    KeyListItem,
    KeyRequest,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    SuccessResponse,
)
from ..services.key_store import KeyStore

router = APIRouter(tags=["keys"])


@router.post("/register", response_model=RegisterResponse)
def register(payload: RegisterRequest, store: KeyStore = Depends(get_key_store)):
    record = store.register(payload.username, payload.time)
    return RegisterResponse(apiKey=record.key, expiresAt=record.expires_at)


@router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest, store: KeyStore = Depends(get_key_store)):
    record = store.login(payload.apiKey, payload.hwid)
    return LoginResponse(success=True, expiresAt=record.expires_at or 0)


@router.get("/list", response_model=List[KeyListItem])
def list_keys(store: KeyStore = Depends(get_key_store)):
    return [
        KeyListItem(key=r.key, username=r.username, hwid=r.hwid, expiresAt=r.expires_at)
        for r in store.list()
    ]


@router.post("/hwid-reset", response_model=SuccessResponse)
def reset_hwid(payload: KeyRequest, store: KeyStore = Depends(get_key_store)):
    store.reset_hwid(payload.apiKey)
    return SuccessResponse()


@router.delete("/key", response_model=SuccessResponse)
def delete_key(payload: KeyRequest, store: KeyStore = Depends(get_key_store)):
    store.delete_key(payload.apiKey)
    return SuccessResponse()
