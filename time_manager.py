#time_manager.py

import constants as C
import logger as log

class TimeManager:
    """Animation clock: moves the preview slice through z as real time passes."""
    def __init__(self):
        self.z = 0.0
        self.is_paused = False
        self.speed_level = C.DEFAULT_SPEED_LEVEL
        self.current_multiplier = C.TIME_MULTIPLIERS[self.speed_level]

    def get_scaled_delta(self, real_delta_seconds):
        """Returns how far along z the slice should move for this much real time."""
        if self.is_paused:
            return 0.0
        return real_delta_seconds * self.current_multiplier

    def advance(self, real_delta_seconds):
        self.z += self.get_scaled_delta(real_delta_seconds)
        return self.z

    def toggle_pause(self):
        self.is_paused = not self.is_paused
        log.log(f"Event: Animation {'paused' if self.is_paused else 'resumed'}.")

    def set_speed(self, level):
        if level in C.TIME_MULTIPLIERS:
            self.speed_level = level
            self.current_multiplier = C.TIME_MULTIPLIERS[level]
            log.log(f"Event: Animation speed set to level {level} ({self.current_multiplier} cells/s).")

    def get_display_string(self):
        speed_str = f"Speed: {self.current_multiplier} cells/s"
        if self.is_paused:
            speed_str = "Speed: PAUSED"
        return f"z: {self.z:.3f} | {speed_str}"
