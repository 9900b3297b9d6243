import warnings
import yaml
from typing import Dict, Any
from .models import MachineConfig, DisplayConfig, DEFAULT_KEYMAP

_KNOWN_KEYS = {"cpu_hz", "timer_hz", "seed", "display", "keymap"}

class ConfigLoader:
    def load_from_file(self, path: str) -> MachineConfig:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
        return self.parse(data or {})

    def parse(self, data: Dict[str, Any]) -> MachineConfig:
        if not isinstance(data, dict):
            raise ValueError(f"Configuration root must be a mapping, got {type(data).__name__}")

        for key in data:
            if key not in _KNOWN_KEYS:
                warnings.warn(f"Unknown configuration key '{key}' ignored")

        cpu_hz = self._parse_int(data.get("cpu_hz", 700))
        timer_hz = self._parse_int(data.get("timer_hz", 60))
        if cpu_hz <= 0 or timer_hz <= 0:
            raise ValueError(f"Clock rates must be positive: cpu_hz={cpu_hz}, timer_hz={timer_hz}")

        seed = data.get("seed")
        if seed is not None:
            seed = self._parse_int(seed)

        # Parse Display
        display_data = data.get("display", {}) or {}
        display = DisplayConfig(
            scale=self._parse_int(display_data.get("scale", 10)),
            foreground=str(display_data.get("foreground", "#33FF66")),
            background=str(display_data.get("background", "#101010")),
        )
        if display.scale <= 0:
            raise ValueError(f"Display scale must be positive: {display.scale}")

        # Parse Keymap
        keymap = dict(DEFAULT_KEYMAP)
        keymap_data = data.get("keymap")
        if keymap_data is not None:
            keymap = {}
            for host_key, chip8_key in keymap_data.items():
                value = self._parse_int(chip8_key)
                if not 0 <= value <= 0xF:
                    raise ValueError(f"Keymap entry '{host_key}' maps to invalid key {value}")
                keymap[self._normalize_host_key(host_key)] = value

        return MachineConfig(
            cpu_hz=cpu_hz,
            timer_hz=timer_hz,
            seed=seed,
            display=display,
            keymap=keymap,
        )

    # @intent:responsibility 1文字のキー名は大文字に揃え、"Space"などの名前付きキーは記述のまま保持します。
    def _normalize_host_key(self, name: Any) -> str:
        name = str(name)
        return name.upper() if len(name) == 1 else name

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            if value.lower().startswith("0x"):
                return int(value, 16)
            return int(value)
        raise ValueError(f"Invalid integer format: {value}")
