"""Точка входа в приложение."""
from average_color.app import GalleryApp
from average_color.config import AppConfig, setup_logging


def main() -> None:
    """Читает конфигурацию, настраивает логирование и запускает главное окно."""
    config = AppConfig()
    setup_logging(config.log_level)
    app = GalleryApp(config)
    app.mainloop()


if __name__ == "__main__":
    main()
