from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from statvalues.config import AppConfig, load_config
from statvalues.core.engine import StatisticValues
from statvalues.core.observations import Width, convert
from statvalues.utils.logging import setup_logging
from statvalues.utils.txt_logger import TxtLogger


app = typer.Typer(add_completion=False)
# Negative observations such as -1 are values, not options
VALUE_ARGS = {"ignore_unknown_options": True}
logger = logging.getLogger(__name__)


def _engine_for(values: List[float], width: Width) -> StatisticValues:
    engine = StatisticValues()
    engine.load(convert(values, width))
    return engine


def _emit(cfg: AppConfig, lines: List[str]) -> None:
    txt: Optional[TxtLogger] = TxtLogger(cfg.env.TXT_LOG_PATH) if cfg.env.TXT_LOG_PATH else None
    try:
        for line in lines:
            typer.echo(line)
            if txt is not None:
                txt.log(line)
    finally:
        if txt is not None:
            txt.close()


@app.command(context_settings=VALUE_ARGS)
def describe(
    values: List[float] = typer.Argument(..., help="Observations"),
    width: Optional[Width] = typer.Option(None, help="Source width (default from config)"),
    moment: Optional[List[int]] = typer.Option(None, "--moment", "-k", help="Raw moment order, repeatable"),
    config: Optional[Path] = typer.Option(None, help="YAML runtime config"),
) -> None:
    """Print count, mean, variance and raw moments."""
    if moment and min(moment) < 1:
        raise typer.BadParameter("moment order must be >= 1", param_hint="--moment")
    cfg = load_config(config)
    setup_logging(cfg.env.LOG_LEVEL)

    engine = _engine_for(values, width or cfg.runtime.default_width)
    summary = engine.summary(moment or cfg.runtime.moment_orders)
    p = cfg.runtime.precision
    lines = [
        f"count: {summary.count}",
        f"mean: {summary.mean:.{p}f}",
        f"variance: {summary.variance:.{p}f}",
    ]
    lines.extend(f"moment[{k}]: {v:.{p}f}" for k, v in summary.raw_moments.items())
    logger.debug("describe", extra={"count": summary.count, "mean": summary.mean})
    _emit(cfg, lines)


@app.command(context_settings=VALUE_ARGS)
def probability(
    event: float = typer.Argument(..., help="Target value"),
    values: List[float] = typer.Argument(..., help="Observations"),
    width: Optional[Width] = typer.Option(None, help="Source width (default from config)"),
    config: Optional[Path] = typer.Option(None, help="YAML runtime config"),
) -> None:
    """Print the empirical probability of observing exactly EVENT."""
    cfg = load_config(config)
    setup_logging(cfg.env.LOG_LEVEL)

    w = width or cfg.runtime.default_width
    engine = _engine_for(values, w)
    # Event goes through the same width conversion as the data
    target = convert([event], w)[0]  # type: ignore[index]
    p = engine.probability_of(target)
    logger.debug("probability", extra={"count": engine.count, "event": target.value})
    _emit(cfg, [f"P({target.value:g}): {p:.{cfg.runtime.precision}f}"])


def main() -> None:
    app()


if __name__ == "__main__":
    main()
