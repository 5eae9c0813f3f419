# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging

from antenna.utils.logging import ANTENNA_HANDLER_NAME, ColoredFormatter, setup_logging


def _antenna_handlers() -> list[logging.Handler]:
    return [
        handler
        for handler in logging.getLogger().handlers
        if handler.get_name() == ANTENNA_HANDLER_NAME
    ]


def test_setup_logging_installs_single_handler() -> None:
    root_logger = logging.getLogger()
    original_level = root_logger.level
    try:
        setup_logging(logging.DEBUG)
        setup_logging(logging.INFO)

        handlers = _antenna_handlers()
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, ColoredFormatter)
        assert root_logger.level == logging.INFO
    finally:
        for handler in _antenna_handlers():
            root_logger.removeHandler(handler)
        root_logger.setLevel(original_level)


def test_colored_formatter_uses_level_color() -> None:
    record = logging.LogRecord(
        "antenna", logging.WARNING, __file__, 1, "careful", None, None
    )

    formatted = ColoredFormatter().format(record)

    assert formatted.startswith(ColoredFormatter.yellow)
    assert "WARNING - [antenna] careful" in formatted
