"""Shared fixtures: fake hosts wired into HostEnvironment instances."""
from types import SimpleNamespace

import pytest

from fxbridge.core.environment import HostEnvironment
from tests.fakes import (
    FakeAEProject,
    FakeComp,
    FakeFile,
    FakeFootage,
    FakeImportOptions,
    FakeLayer,
    FakePremiereProject,
    FakeProjectItem,
    FakeSequence,
    FakeTrackItem,
    ae_app,
    premiere_app,
)


@pytest.fixture
def sequence() -> FakeSequence:
    seq = FakeSequence(video_tracks=3, audio_tracks=2, player_position=12.0)
    seq.videoTracks[0].add(
        FakeTrackItem(
            "interview.mp4",
            start=2.0,
            end=8.0,
            in_point=1.0,
            out_point=7.0,
            project_item=FakeProjectItem("interview.mp4", media_path="/media/interview.mp4"),
        )
    )
    return seq


@pytest.fixture
def premiere_project(sequence) -> FakePremiereProject:
    return FakePremiereProject(sequence)


@pytest.fixture
def premiere_env(premiere_project) -> HostEnvironment:
    return HostEnvironment(
        {
            "app": premiere_app(premiere_project),
            "BridgeTalk": SimpleNamespace(appName="premierepro"),
            "qe": object(),
        }
    )


@pytest.fixture
def footage(tmp_path) -> FakeFootage:
    path = tmp_path / "plate.mov"
    path.write_bytes(b"\x00")
    return FakeFootage("plate.mov", str(path))


@pytest.fixture
def comp(footage) -> FakeComp:
    composition = FakeComp(
        [
            FakeLayer("Title", in_point=0.0, out_point=3.0),
            FakeLayer("plate.mov", in_point=1.5, out_point=9.5, start_time=0.5, source=footage),
        ],
        time=4.0,
    )
    return composition


@pytest.fixture
def ae_project(comp) -> FakeAEProject:
    return FakeAEProject(comp)


@pytest.fixture
def ae_env(ae_project) -> HostEnvironment:
    return HostEnvironment(
        {
            "app": ae_app(ae_project),
            "BridgeTalk": SimpleNamespace(appName="aftereffects"),
            "ImportOptions": FakeImportOptions,
            "File": FakeFile,
        }
    )


@pytest.fixture
def output_file(tmp_path):
    path = tmp_path / "generated.mp4"
    path.write_bytes(b"\x00\x00")
    return path
