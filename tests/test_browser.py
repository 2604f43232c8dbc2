"""Tests for the browser launcher."""

from __future__ import annotations

import webbrowser

from pytest_mock import MockerFixture

from vers._internal.browser import open_in_browser


def test_open_in_browser_uses_webbrowser(mocker: MockerFixture) -> None:
    """The standard browser controller is tried first."""
    open_mock = mocker.patch("vers._internal.browser.webbrowser.open", return_value=True)
    popen_mock = mocker.patch("vers._internal.browser.subprocess.Popen")

    assert open_in_browser("https://dashboard.hdr.is") is True
    open_mock.assert_called_once_with("https://dashboard.hdr.is")
    popen_mock.assert_not_called()


def test_open_in_browser_falls_back_to_xdg_open(mocker: MockerFixture) -> None:
    """When no controller accepts the URL, xdg-open is launched on Linux."""
    mocker.patch("vers._internal.browser.webbrowser.open", side_effect=webbrowser.Error("no browser"))
    mocker.patch("vers._internal.browser.sys.platform", "linux")
    mocker.patch("vers._internal.browser.shutil.which", return_value="/usr/bin/xdg-open")
    popen_mock = mocker.patch("vers._internal.browser.subprocess.Popen")

    assert open_in_browser("https://dashboard.hdr.is") is True
    assert popen_mock.call_args.args[0] == ["xdg-open", "https://dashboard.hdr.is"]


def test_open_in_browser_reports_failure_without_raising(mocker: MockerFixture) -> None:
    """Missing launchers result in False rather than an exception."""
    mocker.patch("vers._internal.browser.webbrowser.open", return_value=False)
    mocker.patch("vers._internal.browser.sys.platform", "linux")
    mocker.patch("vers._internal.browser.shutil.which", return_value=None)
    popen_mock = mocker.patch("vers._internal.browser.subprocess.Popen")

    assert open_in_browser("https://dashboard.hdr.is") is False
    popen_mock.assert_not_called()
