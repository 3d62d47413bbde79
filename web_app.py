"""
This is the main file for the web application.
It serves the cattery page and the favorites REST endpoints.
"""

from flask import Flask, render_template, request, jsonify
import logging

# --- Logging Configuration ---
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s')

# --- Core Imports ---
from cats.cat import Cat, ValidationError
from cats.in_memory_cat_db import InMemoryCatDB
from utils.cat_images import cat_image_url
import config

app = Flask(__name__)

# --- Store Initialization ---
logging.info("Initializing favorites from default data directories...")
favorites_db = InMemoryCatDB.from_directories(config.CAT_DATA_DIRS)
logging.info("Default application initialization complete.")


def _persist_favorites():
    """Writes the favorites store to disk when a save file is configured."""
    if config.FAVORITES_SAVE_FILE:
        favorites_db.save_to_file(config.FAVORITES_SAVE_FILE)


def _parse_cat_id(cat_id: str):
    """Ids allocated here are integers; ids loaded from elsewhere may be opaque strings."""
    return int(cat_id) if cat_id.isdigit() else cat_id


def _card(cat: Cat) -> dict:
    """Builds the template context for one cat card."""
    return {
        "cat": cat,
        "image_url": cat_image_url(cat),
        "parent_image_urls": [cat_image_url(dna) for dna in cat.parents],
    }

# --- Routes ---

@app.route("/")
def index():
    """Serves the cattery page: random originals plus saved favorites."""
    originals = [Cat.generate_random() for _ in range(config.ORIGINAL_CAT_COUNT)]
    favorites = favorites_db.get_all_cats()
    return render_template(
        "index.html",
        originals=[_card(c) for c in originals],
        kittens=[_card(c) for c in favorites],
    )

@app.route("/cats", methods=["GET"])
def list_cats():
    """Returns every saved favorite, or only those bred from ?parent=<dna>."""
    parent_dna = request.args.get("parent")
    if parent_dna:
        cats = favorites_db.get_cats_by_parent(parent_dna)
    else:
        cats = favorites_db.get_all_cats()
    return jsonify([c.to_record() for c in cats])

@app.route("/cats/random", methods=["GET"])
def random_cats():
    """Returns freshly generated cats; they are not saved."""
    try:
        count = int(request.args.get("count", config.ORIGINAL_CAT_COUNT))
    except ValueError:
        count = 0
    if count < 1 or count > config.MAX_RANDOM_CATS:
        return jsonify({"error": f"count must be between 1 and {config.MAX_RANDOM_CATS}"}), 400
    return jsonify([Cat.generate_random().to_record() for _ in range(count)])

@app.route("/cats/<cat_id>", methods=["GET"])
def get_cat(cat_id):
    """Returns one saved favorite."""
    cat = favorites_db.get_cat_by_id(_parse_cat_id(cat_id))
    if cat is None:
        return jsonify({"error": f"Cat {cat_id} not found."}), 404
    return jsonify(cat.to_record())

@app.route("/cats", methods=["POST"])
def create_cat():
    """Saves a favorite from {dna, parent0, parent1}."""
    data = request.get_json(silent=True)
    logging.info(f"Received save request: {data}")
    if not isinstance(data, dict):
        return jsonify({"error": "Missing cat record"}), 400

    try:
        cat = Cat.from_record({
            "dna": data.get("dna"),
            "parent0": data.get("parent0"),
            "parent1": data.get("parent1"),
        })
    except ValidationError as e:
        logging.warning(f"Rejected cat record {data}: {e}")
        return jsonify({"error": str(e)}), 400

    if not cat.is_bred:
        logging.warning(f"Rejected cat record without parents: {data}")
        return jsonify({"error": "Only bred cats can be favorited"}), 400

    stored = favorites_db.add_cat(cat)
    _persist_favorites()
    return jsonify(stored.to_record()), 201

@app.route("/cats/<cat_id>", methods=["DELETE"])
def delete_cat(cat_id):
    """Removes a saved favorite."""
    if not favorites_db.remove_cat(_parse_cat_id(cat_id)):
        return jsonify({"error": f"Cat {cat_id} not found."}), 404
    _persist_favorites()
    return jsonify({})

@app.route("/mate", methods=["POST"])
def mate():
    """Breeds a kitten from {dna, mate_dna}. The kitten is not saved."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    dna = data.get("dna")
    mate_dna = data.get("mate_dna")
    if not dna or not mate_dna:
        return jsonify({"error": "Missing dna or mate_dna"}), 400

    try:
        kitten = Cat.construct(dna).mate(Cat.construct(mate_dna))
    except ValidationError as e:
        return jsonify({"error": str(e)}), 400

    logging.info(f"Mated {dna} with {mate_dna}: {kitten.dna}")
    record = kitten.to_record()
    record["image_url"] = cat_image_url(kitten)
    record["parent_image_urls"] = [cat_image_url(p) for p in kitten.parents]
    return jsonify(record)

# Add error handler for 404
@app.errorhandler(404)
def page_not_found(e):
    return jsonify({"error": "Not found"}), 404


# Add error handler for 500
@app.errorhandler(500)
def internal_server_error(e):
    logging.exception("Internal Server Error")
    return jsonify({"error": "Internal server error"}), 500


# --- Run the App ---
if __name__ == "__main__":
    # Debug mode is helpful during development
    app.run(port=3000, debug=True)
