from course_recommendation.logic.ranker import rank_courses, select_top_n
from factories import make_scored


def _ids(scored):
    return [s.course.id for s in scored]


def test_empty_input_selects_nothing():
    assert select_top_n([], 5) == []


def test_zero_limit_selects_nothing():
    assert select_top_n([make_scored("a", 90)], 0) == []


def test_single_pick_is_top_score_with_ties_in_input_order():
    scored = [make_scored("a", 70), make_scored("b", 90), make_scored("c", 90)]

    assert _ids(select_top_n(scored, 1)) == ["b"]


def test_rank_courses_is_stable():
    scored = [make_scored("a", 50), make_scored("b", 70), make_scored("c", 50)]

    assert _ids(rank_courses(scored)) == ["b", "a", "c"]


def test_no_course_selected_twice():
    scored = [make_scored("a", 90), make_scored("a", 80), make_scored("b", 70)]

    picks = select_top_n(scored, 5)

    assert _ids(picks) == ["a", "b"]
    assert picks[0].relevance_score == 90


def test_new_pathway_beats_higher_score():
    scored = [
        make_scored("A1", 90, ["Data Science"]),
        make_scored("A2", 88, ["Data Science"]),
        make_scored("A3", 86, ["Data Science"]),
        make_scored("B1", 82, ["Cybersecurity"]),
    ]

    assert _ids(select_top_n(scored, 2)) == ["A1", "B1"]


def test_new_level_counts_as_novelty():
    scored = [
        make_scored("a", 90, ["Data Science"], "beginner"),
        make_scored("b", 85, ["Data Science"], "beginner"),
        make_scored("c", 80, ["Data Science"], "advanced"),
    ]

    assert _ids(select_top_n(scored, 2)) == ["a", "c"]


def test_falls_back_to_score_order_without_novelty():
    scored = [
        make_scored("a", 90, ["Data Science"]),
        make_scored("b", 80, ["data science"]),
        make_scored("c", 85, ["Data Science"]),
    ]

    assert _ids(select_top_n(scored, 3)) == ["a", "c", "b"]


def test_returns_everything_when_fewer_than_limit():
    scored = [make_scored("a", 10), make_scored("b", 20)]

    assert _ids(select_top_n(scored, 5)) == ["b", "a"]


def test_limit_is_respected():
    scored = [make_scored(str(i), i, [f"P{i}"]) for i in range(10)]

    picks = select_top_n(scored, 3)

    assert len(picks) == 3
    assert _ids(picks) == ["9", "8", "7"]
