"""Version information for mixdeck."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to the binding document or CLI
# MINOR: New features, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.2.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.2.0 - Binding persistence rework
#         - Single-writer lock around the slider_mapping read-modify-write
#         - Atomic whole-document replace (temp file + rename)
#         - Slots coerced once on load (bare strings, mixed lists)
#         - Bounded waits on hyprctl/pactl, timeouts reported as resolution errors
#         - Window class identification strategy
# 0.1.0 - Initial release
#         - Noise-filtered slider readings
#         - Focused window -> audio stream owner resolution (Hyprland + PulseAudio)
