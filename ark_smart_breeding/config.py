from __future__ import annotations

from dataclasses import dataclass


APP_TITLE = "ARK Smart Breeding"

DATA_FOLDER = "data"
VALUES_FOLDER = "values"

VALUES_JSON = "values.json"
SERVER_MULTIPLIERS_JSON = "serverMultipliers.json"
TAMING_FOOD_JSON = "tamingFoodData.json"
MODS_MANIFEST_JSON = "_manifest.json"
KIBBLES_JSON = "kibbles.json"
ALIASES_JSON = "aliases.json"
ARK_DATA_JSON = "ark_data.json"
IGNORE_SPECIES_CLASSES_JSON = "ignoreSpeciesClasses.json"
CUSTOM_REPLACINGS_JSON = "customReplacings.json"

PROBE_FILE_NAME = "testFile.txt"


@dataclass(frozen=True, slots=True)
class StorageLayout:
    """
    Folder and file names used below the storage base directory.

    One instance (DEFAULT_LAYOUT) is shared by the whole process; tests and
    tools can build their own.
    """

    data_folder: str = DATA_FOLDER
    values_folder: str = VALUES_FOLDER
    fallback_app_name: str = APP_TITLE
    probe_file_name: str = PROBE_FILE_NAME

    values: str = VALUES_JSON
    server_multipliers: str = SERVER_MULTIPLIERS_JSON
    taming_food: str = TAMING_FOOD_JSON
    mods_manifest: str = MODS_MANIFEST_JSON
    kibbles: str = KIBBLES_JSON
    aliases: str = ALIASES_JSON
    ark_data: str = ARK_DATA_JSON
    ignore_species_classes: str = IGNORE_SPECIES_CLASSES_JSON
    custom_replacings: str = CUSTOM_REPLACINGS_JSON


DEFAULT_LAYOUT = StorageLayout()
