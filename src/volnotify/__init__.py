"""volnotify — volume/mute keys with an on-screen notification.

Thin orchestration over ``pactl`` and a desktop notifier, built with the
same cli / core / infra layering throughout.
"""

from volnotify.version import __version__

__all__: list[str] = ["__version__"]
