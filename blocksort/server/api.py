"""
FastAPI REST API for blocksort.

Exposes rotation ranking, the Burrows-Wheeler transform, move-to-front
coding and the combined pipeline over HTTP. Every payload accepts either a
string (UTF-8 encoded) or a list of byte values.
"""

from typing import List, Optional, Union

import uvicorn
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from blocksort import __version__, bwt, mtf, pipeline
from blocksort.bwt import TransformedBlock
from blocksort.errors import BlockSortError
from blocksort.suffix_array import (
    DEFAULT_STRATEGY,
    RANKING_STRATEGIES,
    rank_rotations,
)
from blocksort.symbols import as_symbols, format_symbols


# Pydantic models for request/response validation
class SymbolsRequest(BaseModel):
    """Request carrying a block of symbols."""
    data: Union[str, List[int]]


class RankRequest(SymbolsRequest):
    """Request body for /v1/rank and /v1/transform."""
    strategy: str = DEFAULT_STRATEGY


class UntransformRequest(SymbolsRequest):
    """Request body for /v1/untransform."""
    origin: Optional[int] = None
    length: Optional[int] = None


class RanksRequest(BaseModel):
    """Request body for /v1/mtf/decode and /v1/decompress."""
    ranks: List[int]


class RankResponse(BaseModel):
    """Sorted rotation offsets."""
    n: int
    strategy: str
    order: List[int]


class TransformResponse(BaseModel):
    """Transformed block."""
    origin: Optional[int]
    data: List[int]
    text: str


class SymbolsResponse(BaseModel):
    """A plain block of symbols."""
    data: List[int]
    text: str


class RanksResponse(BaseModel):
    """MTF rank stream."""
    ranks: List[int]


# Initialize FastAPI app
app = FastAPI(
    title="blocksort API",
    description="Burrows-Wheeler transform and move-to-front coding",
    version=__version__
)


def _symbols(data: Union[str, List[int]]) -> bytes:
    """Convert request data to bytes, mapping validation errors to 400."""
    try:
        return as_symbols(data, name="data")
    except BlockSortError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _check_strategy(strategy: str):
    if strategy not in RANKING_STRATEGIES:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown ranking strategy '{strategy}'. "
                   f"Available: {list(RANKING_STRATEGIES.keys())}"
        )


def _symbols_response(data: bytes) -> SymbolsResponse:
    return SymbolsResponse(data=list(data), text=format_symbols(data))


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


@app.get("/v1/strategies")
async def list_strategies():
    """List available rotation ranking strategies."""
    return {
        "default": DEFAULT_STRATEGY,
        "strategies": list(RANKING_STRATEGIES.keys()),
    }


@app.post("/v1/rank", response_model=RankResponse)
async def rank(request: RankRequest):
    """
    Sort all rotations of a block.

    Example:
        ```
        POST /v1/rank
        {"data": "ABRACADABRA!"}
        ```
    """
    _check_strategy(request.strategy)
    data = _symbols(request.data)
    order = rank_rotations(data, request.strategy)
    return RankResponse(n=len(data), strategy=request.strategy, order=order.tolist())


@app.post("/v1/transform", response_model=TransformResponse)
async def transform(request: RankRequest):
    """
    Burrows-Wheeler transform of a block.

    Example:
        ```
        POST /v1/transform
        {"data": "ABRACADABRA!"}
        -> {"origin": 3, "text": "ARD!RCAAAABB", ...}
        ```
    """
    _check_strategy(request.strategy)
    block = bwt.transform(_symbols(request.data), strategy=request.strategy)
    return TransformResponse(
        origin=block.origin,
        data=list(block.data),
        text=format_symbols(block.data)
    )


@app.post("/v1/untransform", response_model=SymbolsResponse)
async def untransform(request: UntransformRequest):
    """Inverse Burrows-Wheeler transform."""
    block = TransformedBlock(request.origin, _symbols(request.data))
    try:
        data = bwt.untransform(block, length=request.length)
    except BlockSortError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _symbols_response(data)


@app.post("/v1/mtf/encode", response_model=RanksResponse)
async def mtf_encode(request: SymbolsRequest):
    """Move-to-front encode a block."""
    return RanksResponse(ranks=list(mtf.encode(_symbols(request.data))))


@app.post("/v1/mtf/decode", response_model=SymbolsResponse)
async def mtf_decode(request: RanksRequest):
    """Move-to-front decode a rank stream."""
    try:
        data = mtf.decode(request.ranks)
    except BlockSortError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _symbols_response(data)


@app.post("/v1/compress", response_model=RanksResponse)
async def compress(request: RankRequest):
    """BWT followed by MTF; returns the encoded frame."""
    _check_strategy(request.strategy)
    payload = pipeline.compress(_symbols(request.data), strategy=request.strategy)
    return RanksResponse(ranks=list(payload))


@app.post("/v1/decompress", response_model=SymbolsResponse)
async def decompress(request: RanksRequest):
    """Invert /v1/compress."""
    try:
        data = pipeline.decompress(request.ranks)
    except BlockSortError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _symbols_response(data)


def start_server(host: str = "0.0.0.0", port: int = 8000):
    """
    Start the blocksort API server.

    Args:
        host: Host to bind to
        port: Port to bind to
    """
    uvicorn.run(app, host=host, port=port)


def main():
    """Entry point for blocksort-serve command."""
    import argparse

    parser = argparse.ArgumentParser(description="blocksort API Server")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to")

    args = parser.parse_args()

    start_server(host=args.host, port=args.port)


if __name__ == "__main__":
    main()
