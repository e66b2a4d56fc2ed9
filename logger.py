# logger.py

# This will hold a reference to the preview's TimeManager instance.
_time_manager = None

def set_time_manager(tm):
    """Sets the animation clock the logger stamps messages with."""
    global _time_manager
    _time_manager = tm

def log(message):
    """Prints a message with the current slice depth if a clock is set."""
    if _time_manager is not None:
        # The clock drives the z coordinate of the preview slice.
        print(f"[z={_time_manager.z:8.3f}] {message}")
    else:
        # Library use and anything logged before the preview starts.
        print(f"[Noise] {message}")
