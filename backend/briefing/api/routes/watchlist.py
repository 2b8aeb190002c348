"""Watchlist and user settings endpoints."""

from fastapi import APIRouter, Depends

from briefing.api.deps import get_store
from briefing.schemas.briefing import AppSettings, WatchlistResponse, WatchlistUpdate
from briefing.services.storage import BriefingStore

router = APIRouter(tags=["watchlist"])


@router.get("/watchlist", response_model=WatchlistResponse)
def get_watchlist(store: BriefingStore = Depends(get_store)) -> WatchlistResponse:
    return WatchlistResponse(tickers=store.load_watchlist())


@router.put("/watchlist", response_model=WatchlistResponse)
def replace_watchlist(
    payload: WatchlistUpdate,
    store: BriefingStore = Depends(get_store),
) -> WatchlistResponse:
    return WatchlistResponse(tickers=store.save_watchlist(payload.tickers))


@router.post("/watchlist/{ticker}", response_model=WatchlistResponse)
def add_ticker(ticker: str, store: BriefingStore = Depends(get_store)) -> WatchlistResponse:
    return WatchlistResponse(tickers=store.add_ticker(ticker))


@router.delete("/watchlist/{ticker}", response_model=WatchlistResponse)
def remove_ticker(ticker: str, store: BriefingStore = Depends(get_store)) -> WatchlistResponse:
    return WatchlistResponse(tickers=store.remove_ticker(ticker))


@router.get("/settings", response_model=AppSettings)
def get_user_settings(store: BriefingStore = Depends(get_store)) -> AppSettings:
    return store.load_settings()


@router.put("/settings", response_model=AppSettings)
def save_user_settings(
    payload: AppSettings,
    store: BriefingStore = Depends(get_store),
) -> AppSettings:
    return store.save_settings(payload)
