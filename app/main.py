"""FastAPI application exposing frequent itemset and association rule mining."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from basket_mining.config import ConfigurationError, MiningConfig
from basket_mining.data.ingestion import Transaction, parse_transactions
from basket_mining.service import DatasetCatalog
from basket_mining.workflows.pipeline import compare_engines, run_mining


def _resolve_datasets_dir() -> Optional[Path]:
    configured = os.environ.get("DATASETS_DIR")
    if configured:
        return Path(configured)
    return None


app = FastAPI(title="Basket Mining")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
catalog = DatasetCatalog(_resolve_datasets_dir())


class MiningPayload(BaseModel):
    transactions: Optional[List[List[str]]] = None
    text: Optional[str] = None
    separator: str = Field(default=",", min_length=1, max_length=8)
    min_support: float = 0.4
    min_confidence: float = 0.6
    algorithm: str = "fp-growth"

    def to_transactions(self) -> List[Transaction]:
        if self.transactions is not None:
            baskets: List[Transaction] = []
            for basket in self.transactions:
                items = [item.strip() for item in basket if item.strip()]
                if items:
                    baskets.append(items)
            return baskets
        if self.text is not None:
            return parse_transactions(self.text, self.separator)
        return []

    def to_config(self) -> MiningConfig:
        return MiningConfig(
            min_support=self.min_support,
            min_confidence=self.min_confidence,
            algorithm=self.algorithm,
        )


def _prepare(payload: MiningPayload) -> Tuple[List[Transaction], MiningConfig]:
    config = payload.to_config()
    try:
        config.validate()
    except ConfigurationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    transactions = payload.to_transactions()
    if not transactions:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="at least one transaction is required",
        )
    return transactions, config


@app.get("/api/samples")
def api_list_samples() -> List[str]:
    return catalog.names()


@app.get("/api/samples/{name}")
def api_sample(name: str) -> Dict[str, object]:
    try:
        transactions = catalog.transactions(name)
    except KeyError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"unknown dataset {name}") from exc
    return {"name": name, "transactions": transactions}


@app.post("/api/mine")
def api_mine(payload: MiningPayload) -> Dict[str, object]:
    transactions, config = _prepare(payload)
    result = run_mining(transactions, config)
    body = result.to_dict()
    body["tree"] = result.tree
    return body


@app.post("/api/compare")
def api_compare(payload: MiningPayload) -> Dict[str, object]:
    transactions, config = _prepare(payload)
    comparison = compare_engines(transactions, config)
    return {
        "equivalent": comparison.equivalent,
        "apriori": {
            "itemsets": sum(len(group) for group in comparison.apriori.itemsets.values()),
            "rules": len(comparison.apriori.rules),
            "duration_seconds": comparison.apriori.stats.duration_seconds,
        },
        "fp_growth": {
            "itemsets": sum(len(group) for group in comparison.fp_growth.itemsets.values()),
            "rules": len(comparison.fp_growth.rules),
            "duration_seconds": comparison.fp_growth.stats.duration_seconds,
        },
    }
