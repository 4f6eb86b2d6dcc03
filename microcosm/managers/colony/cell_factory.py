from utils.logger.logger import Logger
from microcosm.models.exceptions import UnknownSpeciesError

# TYPES OF CELLS
from .cells.base_cell import BaseCell
from .cells.mycoplasma import Mycoplasma
from .cells.chromacystis import Chromacystis
from .cells.phasophyta import Phasophyta
from .cells.polycephalum import Polycephalum

class CellFactory:
    """Create cells of registered species by name or class."""
    # REGISTERED SPECIES, IN THE ORDER USED FOR RANDOM CHOICE
    _species_types = {}


    @classmethod
    def register_species_type(cls, species_class):
        """Register a species class under its species name."""
        # LOGGING THE REGISTRATION OF SPECIES TYPE
        Logger.log(f"Registering species type '{species_class.species_name}' with class {species_class}")
        cls._species_types[species_class.species_name.lower()] = species_class

    @classmethod
    def get_species_type(cls, species):
        """
        Resolve a species key to its class.

        Args:
            species: Registered species name (case insensitive) or species class.

        Raises:
            UnknownSpeciesError: If the species is not registered.
        """
        if isinstance(species, type) and issubclass(species, BaseCell):
            if species in cls._species_types.values():
                return species
            raise UnknownSpeciesError(f"Species class {species.__name__} is not registered.")

        species_class = cls._species_types.get(str(species).lower())
        if species_class is None:
            Logger.log(f"UnknownSpeciesError: {species}", Logger.LogPriority.ERROR)
            raise UnknownSpeciesError(
                f"Unknown species '{species}'. Registered: {', '.join(cls.get_registered_species())}"
            )
        return species_class

    @classmethod
    def get_registered_species(cls):
        """Return the registered species names in registration order."""
        return [species_class.species_name for species_class in cls._species_types.values()]

    @classmethod
    def get_registered_types(cls):
        return list(cls._species_types.values())

    @classmethod
    def create_cell(cls, species, field, location, rng=None, disease=None, revived=False, alive=True):
        """
        Build a cell of the given species at a location.

        Revived cells start with the species revival colour, populated cells
        with its populate colour.
        """
        species_class = cls.get_species_type(species)
        color = species_class.revival_color if revived else species_class.populate_color
        return species_class(field, location, color=color, rng=rng, disease=disease, alive=alive)

    @classmethod
    def create_random_cell(cls, field, location, rng, disease=None):
        """Pick a registered species uniformly with one integer draw and build it."""
        species_types = cls.get_registered_types()
        species_class = species_types[int(rng.integers(len(species_types)))]
        return cls.create_cell(species_class, field, location, rng=rng, disease=disease)


# REGISTER SPECIES TYPES
Logger.log("Registering species with factory...")

CellFactory.register_species_type(Mycoplasma)
CellFactory.register_species_type(Chromacystis)
CellFactory.register_species_type(Phasophyta)
CellFactory.register_species_type(Polycephalum)
