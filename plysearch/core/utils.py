from plysearch.core.search import INF


def format_info(depth, score, nodes, elapsed, pv_moves):
    """UCI-style info line; sentinel scores print as mate."""
    pv_str = " ".join(m.uci() for m in pv_moves)
    nps = int(nodes / elapsed) if elapsed > 0 else 0

    if abs(score) > INF - 100:
        # sentinels are INF +/- remaining depth
        score_str = f"mate {'+' if score > 0 else '-'}"
    else:
        score_str = f"cp {score}"

    return f"info depth {depth} score {score_str} nodes {nodes} nps {nps} time {int(elapsed * 1000)} pv {pv_str}"
