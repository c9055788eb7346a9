"""GenerateService — synthetic plot dataset generation.

Plots ``1..total`` are laid out row by row on a grid ``ceil(sqrt(total))``
plots wide, starting at longitude -180 / latitude 90, each plot one degree
square. A random subset of ``sold`` plots gets an owner wallet; when at
least two plots are sold, the first and last plot are always among them.

Passing ``seed`` makes the output reproducible.
"""

from __future__ import annotations

import math
import random
from pathlib import Path
from typing import Any

from plotctl.infrastructure.dataset import write_dataset
from plotctl.services.base import BaseService
from plotctl.services.result import ServiceResult
from plotctl.services.telemetry import trace_span, traced

LONGITUDE_RANGE = 360
LATITUDE_RANGE = 180
PLOT_SIZE = 1


def random_wallet(rng: random.Random) -> str:
    """``0x`` followed by 40 lowercase hex digits."""
    return "0x" + "".join(rng.choice("0123456789abcdef") for _ in range(40))


def grid_coordinates(plot_id: int, total: int) -> dict[str, dict[str, float]]:
    """Bounding box of *plot_id* on the catalogue grid, rounded to 2 dp."""
    per_row = math.ceil(math.sqrt(total))
    rows = math.ceil(total / per_row)
    row, col = divmod(plot_id - 1, per_row)

    long_min = -180 + col * (LONGITUDE_RANGE / per_row)
    lat_max = 90 - row * (LATITUDE_RANGE / rows)
    return {
        "longitude": {"min": round(long_min, 2), "max": round(long_min + PLOT_SIZE, 2)},
        "latitude": {"min": round(lat_max - PLOT_SIZE, 2), "max": round(lat_max, 2)},
    }


def pick_sold(rng: random.Random, total: int, sold: int) -> set[int]:
    if sold <= 0:
        return set()
    if sold == 1:
        return {1}
    inner = rng.sample(range(2, total), sold - 2) if total > 2 else []
    return {1, total, *inner}


def build_dataset(
    total: int,
    sold: int,
    *,
    seed: int | None = None,
    owner_pool: int = 0,
) -> dict[str, Any]:
    """Build a dataset document in the generated record format."""
    rng = random.Random(seed)
    sold_ids = pick_sold(rng, total, sold)
    wallets = [random_wallet(rng) for _ in range(owner_pool)]

    lands: list[dict[str, Any]] = []
    for plot_id in range(1, total + 1):
        land: dict[str, Any] = {"id": plot_id, "isSold": plot_id in sold_ids}
        if plot_id in sold_ids:
            land["owner"] = rng.choice(wallets) if wallets else random_wallet(rng)
        land["coordinates"] = grid_coordinates(plot_id, total)
        lands.append(land)

    return {"totalLands": total, "soldLands": len(sold_ids), "lands": lands}


class GenerateService(BaseService):
    """Writes a fresh synthetic dataset."""

    @traced
    def generate(
        self,
        *,
        total: int,
        sold: int,
        seed: int | None = None,
        owner_pool: int = 0,
        output: Path | None = None,
    ) -> ServiceResult:
        """Generate *total* plots, *sold* of them owned, and write the JSON file.

        Args:
            total: Number of plots (ids ``1..total``).
            sold: Number of sold plots, ``0 <= sold <= total``.
            seed: Random seed for reproducible output.
            owner_pool: Draw owners from this many wallets (0 = one wallet per plot).
            output: Destination file; defaults to the store's dataset path.
        """
        if total < 1:
            return ServiceResult.failure(
                "generate", "INVALID_ARGUMENT", "total must be at least 1", total=total
            )
        if not 0 <= sold <= total:
            return ServiceResult.failure(
                "generate",
                "INVALID_ARGUMENT",
                "sold must be between 0 and total",
                sold=sold,
                total=total,
            )
        if owner_pool < 0:
            return ServiceResult.failure(
                "generate", "INVALID_ARGUMENT", "owner_pool cannot be negative"
            )

        with trace_span("build"):
            document = build_dataset(total, sold, seed=seed, owner_pool=owner_pool)

        path = output or self._store.path
        try:
            write_dataset(path, document)
        except OSError as exc:
            return ServiceResult.failure(
                "generate", "WRITE_FAILED", f"Cannot write {path}: {exc}", path=str(path)
            )

        if path == self._store.path and self._store.loaded:
            self._store.reload()

        return ServiceResult(
            ok=True,
            op="generate",
            data={"path": str(path), "total": total, "sold": document["soldLands"]},
        )
