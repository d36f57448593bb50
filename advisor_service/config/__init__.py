from advisor_service.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
