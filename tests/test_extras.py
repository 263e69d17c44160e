from schemas import Scene
from vidplan.extras import build_extras, thumbnail_scene, voiceover_lines
from vidplan.normalizer import normalize_options
from vidplan.scenes import synthesize_scenes
from vidplan.summary import build_summary


def _scene(index, atmosphere):
    return Scene(
        index=index, setting=f"setting {index}", characters="someone", camera="Wide shot",
        lighting="soft", key_actions=f"action {index}", atmosphere=atmosphere,
    )


def _parts(**raw):
    opts = normalize_options({"topic": "A paper boat sailing down a rain gutter", **raw})
    summary = build_summary(opts)
    return opts, summary, synthesize_scenes(opts)


def test_no_flags_means_no_extras():
    opts, summary, scenes = _parts()
    assert build_extras(summary, scenes, opts) is None


def test_voiceover_only():
    opts, summary, scenes = _parts(sceneCount=4, includeVoiceover=True)
    extras = build_extras(summary, scenes, opts)
    assert extras is not None
    assert extras.thumbnail_prompt is None
    assert len(extras.voiceover_lines) == 4
    for line, scene in zip(extras.voiceover_lines, scenes):
        assert scene.key_actions in line
        assert scene.atmosphere in line


def test_thumbnail_only():
    opts, summary, scenes = _parts(sceneCount=3, includeThumbnail=True, visualStyle="surreal")
    extras = build_extras(summary, scenes, opts)
    assert extras.voiceover_lines is None
    assert extras.thumbnail_prompt
    assert summary.title in extras.thumbnail_prompt
    assert "surreal" in extras.thumbnail_prompt
    assert thumbnail_scene(scenes).setting in extras.thumbnail_prompt


def test_thumbnail_scene_prefers_longest_atmosphere():
    scenes = (_scene(1, "short"), _scene(2, "much longer atmosphere"), _scene(3, "mid length"))
    assert thumbnail_scene(scenes).index == 2


def test_thumbnail_scene_ties_go_to_lowest_index():
    scenes = (_scene(1, "aa"), _scene(2, "bbbb"), _scene(3, "cccc"))
    assert thumbnail_scene(scenes).index == 2


def test_voiceover_lines_are_deterministic():
    _, _, scenes = _parts(sceneCount=5)
    assert voiceover_lines(scenes, "topic") == voiceover_lines(scenes, "topic")
    assert len(set(voiceover_lines(scenes, "topic"))) == 5
