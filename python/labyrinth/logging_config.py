import logging.config


def configure_logging(level: str = "WARNING") -> None:
    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,

        "formatters": {
            "rich": {
                "format": "%(name)s: %(message)s",
                "datefmt": "%H:%M:%S",
            },
        },

        "handlers": {
            "console": {
                "class": "rich.logging.RichHandler",
                "formatter": "rich",
                "level": level,
                "show_path": False,
                "markup": False,
            },
        },

        "loggers": {
            "labyrinth": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
        },
    }

    logging.config.dictConfig(logging_config)
