# application/config.py
import json
import os


class Config:
    _instance = None

    def __new__(cls, *args, **kwargs):
        if not cls._instance:
            cls._instance = super(Config, cls).__new__(cls)
        return cls._instance

    def __init__(self, config_file="config.json"):
        if not hasattr(self, "_initialized"):  # Prevent re-initialization
            self.data = {}
            if os.path.exists(config_file):
                with open(config_file, "r") as f:
                    self.data = json.load(f)
            self._initialized = True

    def get(self, *keys, default=None):
        """
        Access nested configuration values.
        Example: config.get('buffers', 'vec3', 'shape')
        """
        value = self.data
        try:
            for key in keys:
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default


# Create a single, globally accessible instance
config = Config()
