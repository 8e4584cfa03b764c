
from .cosmosdb import CosmosDBConnection
