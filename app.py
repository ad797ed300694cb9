"""Flask web application for the barter marketplace feed."""

import logging

from flask import Flask, request, jsonify

from barter.matching import explain_relevance
from barter.models import BarterOffer, SystemTaxonomy, UserProfile
from barter.services.feed_service import FeedFilters, FeedService, FeedServiceError
from barter.services.offer_service import OfferService, OfferServiceError
from config import LOG_LEVEL, MAX_CONTENT_LENGTH

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config['MAX_CONTENT_LENGTH'] = MAX_CONTENT_LENGTH

# Swapped out in tests
offer_service = OfferService()


def _json_body():
    """Request JSON as a dict; anything else counts as an empty body."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _object_or_none(data, key):
    """Return ``data[key]`` if it is an object, None if absent.

    Raises:
        ValueError: If the value is present but not an object
    """
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ValueError(f'{key} must be an object')
    return value


def _load_offers(items):
    offers = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise ValueError(f'offers[{index}] must be an object')
        offers.append(BarterOffer.from_dict(item))
    return offers


@app.route('/health')
def health():
    """Liveness probe."""
    return jsonify({'status': 'ok'})


@app.route('/api/feed', methods=['POST'])
def api_feed():
    """Build the "all" or "for you" feed from the posted offers."""
    data = _json_body()

    offers_data = data.get('offers')
    if not isinstance(offers_data, list):
        return jsonify({'error': 'offers must be a list'}), 400

    try:
        user_data = _object_or_none(data, 'user')
        viewer = UserProfile.from_dict(user_data) if user_data else None
        offers = _load_offers(offers_data)
        taxonomy = SystemTaxonomy.from_dict(_object_or_none(data, 'taxonomy'))
        filters = FeedFilters.from_dict(_object_or_none(data, 'filters'))
        feed = FeedService(taxonomy).build(offers, filters, viewer=viewer)
    except (ValueError, FeedServiceError) as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        logger.exception("[feed] failed")
        return jsonify({'error': str(e)}), 500

    return jsonify({
        'success': True,
        'offers': [o.to_dict() for o in feed],
        'count': len(feed),
    })


@app.route('/api/relevance', methods=['POST'])
def api_relevance():
    """Explain whether one offer is relevant for one user."""
    data = _json_body()

    if not data.get('user') or not data.get('offer'):
        return jsonify({'error': 'user and offer are required'}), 400

    try:
        user = UserProfile.from_dict(_object_or_none(data, 'user'))
        offer = BarterOffer.from_dict(_object_or_none(data, 'offer'))
        taxonomy = SystemTaxonomy.from_dict(_object_or_none(data, 'taxonomy'))
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        logger.exception("[relevance] failed")
        return jsonify({'error': str(e)}), 500

    decision = explain_relevance(user, offer, taxonomy)

    return jsonify({'success': True, **decision.to_dict()})


@app.route('/api/optimize', methods=['POST'])
def api_optimize():
    """Draft a structured offer from free text."""
    data = _json_body()

    raw_input = data.get('rawInput')
    if not isinstance(raw_input, str) or not raw_input.strip():
        return jsonify({'error': 'Missing rawInput in request body'}), 400

    try:
        draft = offer_service.optimize(raw_input)
    except OfferServiceError as e:
        logger.error("[optimize] failed: %s", e)
        return jsonify({'error': 'Failed to optimize offer', 'details': str(e)}), 500

    return jsonify({'success': True, 'offer': draft.to_dict()})


if __name__ == '__main__':
    app.run(debug=True, port=5000)
