from radixtool.effects import fade_out_effect, typewriter_effect


def test_typewriter_prints_text_and_waits_per_character(console):
    delays = []
    typewriter_effect(console, "Hello", 0.05, sleep=delays.append)

    assert console.file.getvalue() == "Hello\n"
    assert delays == [0.05] * 5


def test_typewriter_without_delay_does_not_sleep(console):
    delays = []
    typewriter_effect(console, "Hi", 0, sleep=delays.append)
    assert delays == []


def test_fade_out_waits_once_per_step(console):
    delays = []
    fade_out_effect(console, "Closing", steps=4, delay=0.1, sleep=delays.append)
    assert delays == [0.1] * 4


def test_fade_out_leaves_nothing_behind_on_plain_output(console):
    fade_out_effect(console, "Closing", steps=3, delay=0, sleep=lambda _: None)
    assert "Closing" not in console.file.getvalue()
