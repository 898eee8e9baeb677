"""
Tests for the version module of the RWA SDK.
"""
import importlib
import re
from importlib import metadata as importlib_metadata
from unittest.mock import mock_open, patch

from rwa_sdk import __version__


def test_version_format():
    """Test that the version string follows semantic versioning"""
    assert re.match(r'^\d+\.\d+\.\d+$', __version__), "Version should follow semantic versioning"


@patch('importlib.metadata.version')
@patch('pathlib.Path.open', new_callable=mock_open, read_data=b'[project]\nversion = "1.2.3"\n')
def test_version_from_file(mock_open_file, mock_metadata_version):
    """When metadata lookup fails, pyproject.toml is read"""
    mock_metadata_version.side_effect = importlib_metadata.PackageNotFoundError
    import rwa_sdk.version as vmod
    importlib.reload(vmod)
    assert vmod.__version__ == "1.2.3"


@patch('importlib.metadata.version')
def test_version_from_metadata(mock_metadata_version):
    """When metadata lookup succeeds, version comes from metadata"""
    mock_metadata_version.return_value = "2.3.4"
    import rwa_sdk.version as vmod
    importlib.reload(vmod)
    assert vmod.__version__ == "2.3.4"


def test_version_file_not_found(monkeypatch):
    """If pyproject.toml is missing, fall back to the default"""
    monkeypatch.setattr(importlib_metadata, 'version', lambda name: (_ for _ in ()).throw(importlib_metadata.PackageNotFoundError()))
    monkeypatch.setattr('pathlib.Path.open', lambda *args, **kwargs: (_ for _ in ()).throw(FileNotFoundError()))
    import rwa_sdk.version as vmod
    importlib.reload(vmod)
    assert vmod.__version__ == vmod.DEFAULT_VERSION


@patch('importlib.metadata.version')
@patch('pathlib.Path.open', new_callable=mock_open, read_data=b'[tool.other]\nname = "x"\n')
def test_version_key_error(mock_open_file, mock_metadata_version):
    """A pyproject.toml without a version falls back to the default"""
    mock_metadata_version.side_effect = importlib_metadata.PackageNotFoundError
    import rwa_sdk.version as vmod
    importlib.reload(vmod)
    assert vmod.__version__ == "0.1.0"


@patch('importlib.metadata.version')
@patch('pathlib.Path.open', new_callable=mock_open, read_data=b'[project\nversion = ')
def test_version_invalid_toml(mock_open_file, mock_metadata_version):
    """A pyproject.toml that does not parse falls back to the default"""
    mock_metadata_version.side_effect = importlib_metadata.PackageNotFoundError
    import rwa_sdk.version as vmod
    importlib.reload(vmod)
    assert vmod.__version__ == vmod.DEFAULT_VERSION
    mock_open_file.assert_called_once_with("rb")


@patch('importlib.metadata.version')
def test_version_looks_up_distribution_name(mock_metadata_version):
    mock_metadata_version.return_value = "9.9.9"
    import rwa_sdk.version as vmod
    importlib.reload(vmod)
    mock_metadata_version.assert_called_once_with("rwa-sdk")
