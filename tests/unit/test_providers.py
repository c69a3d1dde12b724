"""Unit tests for imagegen.providers — the simulated generation backend."""

import pytest

from imagegen.providers import ImageProviderError, SimulatedImageProvider, get_image_provider


class TestSimulatedImageProvider:
    def test_returns_url_under_base(self):
        provider = SimulatedImageProvider(base_url="https://cdn.test/", failure_trigger="error")
        assert provider.generate("a red fox", "generated_x.png") == "https://cdn.test/generated_x.png"

    @pytest.mark.parametrize("prompt", ["error", "An ERROR here", "terror"])
    def test_trigger_word_fails(self, prompt):
        provider = SimulatedImageProvider(base_url="https://cdn.test", failure_trigger="error")
        with pytest.raises(ImageProviderError):
            provider.generate(prompt, "f.png")

    def test_custom_trigger(self):
        provider = SimulatedImageProvider(base_url="https://cdn.test", failure_trigger="boom")
        assert provider.generate("error", "f.png").endswith("/f.png")
        with pytest.raises(ImageProviderError):
            provider.generate("Boom goes the dynamite", "f.png")

    def test_empty_trigger_never_fails(self):
        provider = SimulatedImageProvider(base_url="https://cdn.test", failure_trigger="")
        assert provider.generate("error", "f.png") == "https://cdn.test/f.png"


def test_dependency_builds_provider_from_settings():
    provider = get_image_provider()
    assert isinstance(provider, SimulatedImageProvider)
    assert provider.base_url == "https://generated-images.example.com"
    assert provider.failure_trigger == "error"
