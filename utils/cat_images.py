"""Placeholder cat images, fetched from an image service keyed by DNA."""

import os
import logging
from io import BytesIO
from typing import List, Optional, Union

import requests
from PIL import Image, UnidentifiedImageError

# Import configuration settings
import config

from cats.cat import Cat


def cat_image_url(cat: Union[Cat, str]) -> str:
    """Returns the image URL for a cat or a bare DNA string."""
    dna = cat.dna if isinstance(cat, Cat) else cat
    return config.CAT_IMAGE_URL_TEMPLATE.format(dna=dna)


def fetch_cat_image(cat: Union[Cat, str], save_dir: Optional[str] = None) -> Optional[str]:
    """Downloads the image for a cat and saves it as <dna>.png.

    Returns the saved path, or None if the image could not be fetched.
    An image already on disk is reused without a request.
    """
    dna = cat.dna if isinstance(cat, Cat) else cat
    save_dir = save_dir or config.IMAGE_SAVE_DIR
    filepath = os.path.join(save_dir, f"{dna}.png")

    if os.path.exists(filepath):
        logging.debug("Image for %s already exists at %s", dna, filepath)
        return filepath

    try:
        os.makedirs(save_dir, exist_ok=True)
    except OSError as e:
        logging.error("Error creating image directory %s: %s", save_dir, e)
        return None

    url = cat_image_url(dna)
    try:
        response = requests.get(url, timeout=config.REQUEST_TIMEOUT)
        response.raise_for_status()
        image = Image.open(BytesIO(response.content))
        image.save(filepath, format="PNG")
    except requests.RequestException as e:
        logging.error("Failed to fetch image for %s from %s: %s", dna, url, e)
        return None
    except (UnidentifiedImageError, OSError) as e:
        logging.error("Failed to decode image for %s: %s", dna, e)
        return None

    logging.info("Saved image for %s: %s", dna, filepath)
    return filepath


def fetch_lineage_images(cat: Cat, save_dir: Optional[str] = None) -> List[Optional[str]]:
    """Fetches the images of both parents of a bred cat."""
    return [fetch_cat_image(parent_dna, save_dir) for parent_dna in cat.parents]
