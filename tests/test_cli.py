"""Tests for the sampling command-line interface."""

import numpy as np

from noisegraph.cli import main


class TestMain:
    """Tests for the CLI entry point."""

    def test_writes_heightmap(self, tmp_path, sample_graph_toml: str) -> None:
        """A valid graph is sampled and saved as a .npy array."""
        config_path = tmp_path / "graph.toml"
        config_path.write_text(sample_graph_toml)
        output_path = tmp_path / "out" / "field.npy"

        code = main(
            [
                str(config_path),
                "--width", "6",
                "--height", "4",
                "--output", str(output_path),
            ]
        )

        assert code == 0
        field = np.load(output_path)
        assert field.shape == (4, 6)

    def test_normalize_flag(self, tmp_path, sample_graph_toml: str) -> None:
        """--normalize rescales the saved field to [0, 1]."""
        config_path = tmp_path / "graph.toml"
        config_path.write_text(sample_graph_toml)
        output_path = tmp_path / "field.npy"

        code = main(
            [
                str(config_path),
                "--width", "8",
                "--height", "8",
                "--normalize",
                "-o", str(output_path),
            ]
        )

        assert code == 0
        field = np.load(output_path)
        assert field.min() == 0.0
        assert field.max() == 1.0

    def test_invalid_graph_fails(self, tmp_path, capsys) -> None:
        """An incomplete graph reports errors and returns 1."""
        config_path = tmp_path / "graph.toml"
        config_path.write_text(
            'root = "height"\n\n[nodes.height]\ntype = "scale_bias"\n'
        )
        output_path = tmp_path / "field.npy"

        code = main([str(config_path), "-o", str(output_path)])

        assert code == 1
        assert not output_path.exists()
        assert "source slot 0 is not connected" in capsys.readouterr().err
