from __future__ import annotations

from pathlib import Path

import pytest

from nnvis.app.visualization_runner import (
    VisualizationConfig,
    build_network,
    format_visualization_result,
    run_visualization,
)
from nnvis.core.activations import SquashingFunction
from nnvis.core.errors import ShapeMismatchError


def test_should_run_visualization_and_report_outputs() -> None:
    config = VisualizationConfig(
        layer_sizes=(2, 1),
        squashing_function=SquashingFunction.RELU,
        input_activations=(3.0, 3.0),
        weights=((1.0, -1.0),),
        biases=((0.5,),),
    )

    result = run_visualization(config)

    assert result.output_activations.tolist() == [0.5]
    assert result.state.layers[1][0].bias == 0.5
    assert result.image_path is None
    summary = format_visualization_result(result)
    assert "Layer sizes: 2 -> 1" in summary
    assert "Output: [0.5000]" in summary


def test_should_write_image_when_path_is_configured(tmp_path: Path) -> None:
    config = VisualizationConfig(
        layer_sizes=(3, 4, 2),
        input_activations=(0.2, 0.4, 0.6),
        seed=7,
        image_path=tmp_path / "network.png",
        canvas_width=400,
        canvas_height=300,
    )

    result = run_visualization(config)

    assert result.image_path == tmp_path / "network.png"
    assert result.image_path.exists()
    assert "Image:" in format_visualization_result(result)


def test_should_reject_weight_layers_with_wrong_size() -> None:
    config = VisualizationConfig(layer_sizes=(2, 2), weights=((1.0, 2.0, 3.0),))

    with pytest.raises(ShapeMismatchError) as error:
        build_network(config)

    assert error.value.expected == 4


def test_should_reject_bias_layers_with_wrong_count() -> None:
    config = VisualizationConfig(layer_sizes=(2, 2, 1), biases=((0.0, 0.0),))

    with pytest.raises(ShapeMismatchError):
        build_network(config)
