from ringconnect.modules.posts.reactions.schemas.reaction import ReactionRow
from ringconnect.modules.posts.reactions.services.aggregator import apply_reaction, summarize_reactions


def rows(*pairs):
    return [ReactionRow(user_id=user_id, reaction_type=kind) for user_id, kind in pairs]


def test_empty_post_has_no_summary():
    summary = summarize_reactions([], viewer_id="u1")

    assert summary.count == 0
    assert summary.top_kind is None
    assert summary.viewer_kind is None


def test_most_frequent_kind_wins():
    summary = summarize_reactions(rows(
        ("u1", "cleanhit"),
        ("u2", "gowild"),
        ("u3", "gowild"),
    ))

    assert summary.count == 3
    assert summary.top_kind == "gowild"


def test_tie_goes_to_kind_seen_first():
    summary = summarize_reactions(rows(
        ("u1", "ontarget"),
        ("u2", "tooheavy"),
        ("u3", "tooheavy"),
        ("u4", "ontarget"),
    ))

    assert summary.top_kind == "ontarget"


def test_viewer_kind_is_reported():
    reactions = rows(("u1", "cleanhit"), ("u2", "championmove"))

    assert summarize_reactions(reactions, viewer_id="u2").viewer_kind == "championmove"
    assert summarize_reactions(reactions, viewer_id="u9").viewer_kind is None
    assert summarize_reactions(reactions).viewer_kind is None


def test_apply_reaction_transitions():
    assert apply_reaction(None, "gowild") == "gowild"
    assert apply_reaction("gowild", "cleanhit") == "cleanhit"
    assert apply_reaction("gowild", "gowild") is None
    assert apply_reaction("gowild", None) is None
    assert apply_reaction(None, None) is None
