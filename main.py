import sys
import os

# Ensure the 'cats', 'core' and 'utils' directories can be found
# This adds the project root directory to the Python path.
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

# Import the Cattery class from the core module
from core.cattery import Cattery
from utils.favorites_api import FavoritesClient
from utils.cat_images import fetch_cat_image, fetch_lineage_images


def main():
    """Starts a cattery session against the favorites server and breeds one kitten."""
    print("Launching Cattery...")
    cattery = Cattery(favorites_client=FavoritesClient())
    cattery.start()
    for cat in cattery.originals:
        print(f"  {cat.dna}")
    print(f"Loaded {len(cattery.kittens)} favorite kittens.")

    first, second = cattery.originals[0], cattery.originals[1]
    cattery.click(first.dna)
    kitten = cattery.click(second.dna)
    print(f"Bred kitten {kitten.dna} from {second.dna} and {first.dna}")
    image_path = fetch_cat_image(kitten)
    if image_path:
        print(f"Kitten portrait saved to {image_path}")
    for parent_path in fetch_lineage_images(kitten):
        if parent_path:
            print(f"Parent portrait saved to {parent_path}")

if __name__ == "__main__":
    main()
