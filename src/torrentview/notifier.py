"""Notification module for torrentview using Apprise."""

from collections.abc import Mapping
from typing import Any, Protocol

import apprise

from . import config, logger
from .fields import TorrentField
from .status import TorrentStatus


class Notifier:
    """Delivers torrent event messages to Apprise services."""

    def __init__(self, urls: list[str]):
        """Register every URL with a fresh Apprise instance.

        Raises:
            ValueError: If Apprise rejects a URL. The password is masked in
                the message.
        """
        self.apprise = apprise.Apprise()
        for url in urls:
            self._register(url)

        logger.debug("Apprise ready with %d service(s)", len(self.apprise))

    def _register(self, url: str) -> None:
        safe_url = logger.redact_url_password(url)
        if not self.apprise.add(url):
            raise ValueError(f"Invalid notification URL: {safe_url}")
        logger.debug("Registered notification service %s", safe_url)

    def notify(
        self,
        title: str,
        body: str,
        notify_type: apprise.NotifyType = apprise.NotifyType.INFO,
    ) -> bool:
        """Deliver one message synchronously.

        Delivery problems are logged, never raised, so callers inside a
        record build are not interrupted.

        Returns:
            Whether any service accepted the message.
        """
        try:
            delivered = bool(
                self.apprise.notify(title=title, body=body, notify_type=notify_type)
            )
        except Exception as e:
            logger.error("Apprise delivery of %r raised: %s", title, e)
            return False

        if delivered:
            logger.debug("Delivered %r", title)
        else:
            logger.warning("No service accepted %r", title)
        return delivered

    def send_download_finished(self, torrent_name: str, torrent_hash: str) -> bool:
        """Send notification for a torrent that finished downloading.

        Args:
            torrent_name: Name of the torrent.
            torrent_hash: Hash of the torrent.

        Returns:
            True if notification was sent successfully.
        """
        return self.notify(
            title="torrentview - Download Finished",
            body=f"Finished: {torrent_name}\nHash: {torrent_hash}",
            notify_type=apprise.NotifyType.SUCCESS,
        )

    def send_torrent_error(
        self, torrent_name: str, torrent_hash: str, message: str
    ) -> bool:
        """Send notification for a torrent the client reports an error for.

        Args:
            torrent_name: Name of the torrent.
            torrent_hash: Hash of the torrent.
            message: Error message reported by the client.

        Returns:
            True if notification was sent successfully.
        """
        return self.notify(
            title="torrentview - Torrent Error",
            body=f"Error: {torrent_name}\nHash: {torrent_hash}\nMessage: {message}",
            notify_type=apprise.NotifyType.FAILURE,
        )


class RecordComparator(Protocol):
    """Receives the previous and new record of a torrent on every build."""

    def compare_new_torrent_data(
        self, previous: Mapping[str, Any], current: Mapping[str, Any]
    ) -> None: ...


class TorrentNotificationService:
    """Compares successive torrent records and sends notifications on changes.

    Keeps no state between calls, so one instance can serve every torrent.
    """

    def __init__(self, notifier: Notifier | None = None):
        self.notifier = notifier

    def compare_new_torrent_data(
        self, previous: Mapping[str, Any], current: Mapping[str, Any]
    ) -> None:
        """Notify about state changes between two records of the same torrent.

        The first record of a torrent (empty previous) never notifies.

        Args:
            previous: Record before the update.
            current: Record after the update.
        """
        if not previous or self.notifier is None:
            return

        name = current.get(TorrentField.NAME) or previous.get(TorrentField.NAME) or ""
        torrent_hash = current.get(TorrentField.HASH) or ""

        if config.cfg.notification.notify_on_finish and is_newly_finished(
            previous, current
        ):
            logger.success("Torrent finished downloading: %s", name)
            self.notifier.send_download_finished(name, torrent_hash)

        if config.cfg.notification.notify_on_error and is_new_error(previous, current):
            message = current.get(TorrentField.MESSAGE) or ""
            logger.warning("Torrent reported an error: %s (%s)", name, message)
            self.notifier.send_torrent_error(name, torrent_hash, message)


def is_newly_finished(previous: Mapping[str, Any], current: Mapping[str, Any]) -> bool:
    """Check whether a torrent reached 100% between two records."""
    old_percent = previous.get(TorrentField.PERCENT_COMPLETE)
    new_percent = current.get(TorrentField.PERCENT_COMPLETE)
    if old_percent is None or new_percent is None:
        return False
    return old_percent < 100 and new_percent == 100


def is_new_error(previous: Mapping[str, Any], current: Mapping[str, Any]) -> bool:
    """Check whether a torrent gained the error status tag between two records."""
    old_status = previous.get(TorrentField.STATUS) or []
    new_status = current.get(TorrentField.STATUS) or []
    return TorrentStatus.ERROR in new_status and TorrentStatus.ERROR not in old_status


# Global notifier instance
_notifier_instance: Notifier | None = None


def init_notifier(urls: list[str] | None = None) -> None:
    """Initialize global notifier instance.

    Should be called once during application startup.

    Args:
        urls: List of Apprise notification URLs. Defaults to the configured
            notification URLs.

    Raises:
        RuntimeError: If already initialized.
        ValueError: If any URL is invalid.
    """
    global _notifier_instance
    if _notifier_instance is not None:
        raise RuntimeError("Notifier already initialized.")

    if urls is None:
        urls = config.cfg.notification.notification_urls

    _notifier_instance = Notifier(urls)


def get_notifier() -> Notifier:
    """Get global notifier instance.

    Returns:
        Notifier instance.

    Raises:
        RuntimeError: If notifier has not been initialized.
    """
    if _notifier_instance is None:
        raise RuntimeError("Notifier not initialized. Call init_notifier() first.")
    return _notifier_instance
