from common.constants import REPEATS


def log_recommendation_trace(logger, snapshot):
    logger.info("=" * REPEATS)
    logger.info(f"RECOMMENDATION TRACE: {snapshot['selected_product']}")
    logger.info("=" * REPEATS)
    logger.info(f"Total purchases: {snapshot['total_purchases']}")
    logger.info(f"{'Item':<20} {'Count':>8} {'Score':>10}")
    logger.info("-" * REPEATS)
    for entry in snapshot["ranked"]:
        logger.info(f"{entry['item_name']:<20} {entry['count']:>8} {entry['score']:>10.4f}")
    logger.info("-" * REPEATS)
    top = [entry["item_name"] for entry in snapshot["top_recommendations"]]
    logger.info(f"🏆 Top recommendations: {top if top else 'none'}")


def log_review_trace(logger, snapshot):
    logger.info("=" * REPEATS)
    logger.info("REVIEW TRACE")
    logger.info("=" * REPEATS)
    logger.info(f"Text length: {snapshot['text_length']}")
    logger.info(f"Tokens: {len(snapshot['raw_tokens'])} raw, {len(snapshot['filtered_tokens'])} after stopwords")
    logger.info(f"Removed stopwords: {snapshot['removed_stopwords']}")
    logger.info(f"Sentiment score: {snapshot['sentiment_score']:+d}")
    logger.info(f"  positive: {snapshot['positive_words']}")
    logger.info(f"  negative: {snapshot['negative_words']}")
    for aspect, keywords in snapshot["detected_aspects"].items():
        logger.info(f"  {aspect:<10} {keywords}")
    logger.info(f"Classification: {snapshot['classification'].value}")
    logger.info(f"Insight: {snapshot['insight']}")
