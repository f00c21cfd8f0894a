import json

from spring_chain.cli import build_parser, build_simulation, main


def test_headless_run_prints_frames(capsys):
    main(["--headless", "--frames", "10", "--every", "5", "--nodes", "4"])
    out = capsys.readouterr().out
    assert "=== Frame 5 t=80.0ms ===" in out
    assert "=== Frame 10 t=160.0ms ===" in out
    assert "[3] @" in out
    assert "[4]" not in out


def test_arguments_go_through_setters(tmp_path):
    preset = tmp_path / "p.json"
    preset.write_text(json.dumps({"gravity": 2.0}))
    args = build_parser().parse_args(
        ["--config", str(preset), "--k", "6", "--length", "abc", "--nodes", "3", "--unlock-anchor"]
    )

    sim = build_simulation(args)

    assert sim.params.gravity == 2.0
    assert sim.params.spring_constant == 6.0
    assert sim.params.rest_length == 80.0
    assert len(sim.chain) == 3
    sim.chain.reset()
    assert len(sim.chain) == 3
    assert sim.chain.anchor_locked is False
