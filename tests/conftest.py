"""
Pytest configuration and fixtures.

Provides sample manifests and a loguru capture sink shared by the test suites.
"""

import pytest
from loguru import logger

SAMPLE_MANIFEST = """<?xml version="1.0" encoding="utf-8"?>
<manifest xmlns:android="http://schemas.android.com/apk/res/android" package="com.example.app">
    <uses-permission android:name="android.permission.INTERNET" />
    <permission android:name="com.example.app.permission.C2D" android:protectionLevel="signature" />
    <uses-permission android:name="android.permission.RECEIVE_BOOT_COMPLETED" />
    <uses-sdk android:minSdkVersion="21" />
    <application android:label="@string/app_name" android:icon="@mipmap/ic_launcher">
        <activity android:name=".HiddenActivity" android:exported="false" />
        <activity android:name=".MainActivity" android:exported="true">
            <intent-filter>
                <action android:name="android.intent.action.MAIN" />
                <category android:name="android.intent.category.LAUNCHER" />
            </intent-filter>
        </activity>
        <service android:name=".SyncService" android:exported="false" />
        <receiver android:name=".BootReceiver" android:exported="true">
            <intent-filter>
                <action android:name="android.intent.action.BOOT_COMPLETED" />
            </intent-filter>
        </receiver>
        <provider android:name=".DataProvider" android:authorities="com.example.app.data" />
        <meta-data android:name="com.example.key" android:value="secret" />
    </application>
</manifest>
"""


def make_manifest(application_body: str = "", manifest_body: str = "") -> str:
    """Wraps component markup into a minimal manifest document."""
    return (
        '<manifest xmlns:android="http://schemas.android.com/apk/res/android" package="com.example.app">'
        f"{manifest_body}"
        f"<application>{application_body}</application>"
        "</manifest>"
    )


@pytest.fixture
def sample_manifest_text():
    return SAMPLE_MANIFEST


@pytest.fixture
def sample_manifest_file(tmp_path):
    path = tmp_path / "AndroidManifest.xml"
    path.write_text(SAMPLE_MANIFEST, encoding="utf-8")
    return path


@pytest.fixture
def log_messages():
    """Collects every loguru message emitted during the test."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(str(message)), format="{message}", level="DEBUG")
    yield messages
    try:
        logger.remove(handler_id)
    except ValueError:
        pass


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.remove()


@pytest.fixture
def manifest_factory():
    return make_manifest
