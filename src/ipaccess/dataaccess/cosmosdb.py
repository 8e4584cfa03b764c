
import os
from azure.cosmos import CosmosClient, ContainerProxy, CosmosDict
from azure.cosmos.exceptions import CosmosResourceNotFoundError
from azure.identity import DefaultAzureCredential
from azure.core.exceptions import ResourceNotFoundError
from azure.core.exceptions import HttpResponseError
from azure.core.exceptions import ClientAuthenticationError
from azure.core.exceptions import ServiceRequestError

CONTAINER_CONNECTIONS = {}
CACHE_CONTAINER_CONNECTIONS = os.environ.get('CACHE_COSMOS_CONTAINER_CONNECTIONS', "true").lower() == "true"

def _create_client(endpoint:str) -> CosmosClient:
    ## Determine if we are using a connection string, key or Managed Identity
    connection_string = os.environ.get('COSMOS_CONNECTION_STRING', None)
    key = os.environ.get('COSMOS_KEY', None)
    if connection_string is not None:
        return CosmosClient.from_connection_string(connection_string)
    if key is not None:
        return CosmosClient(endpoint, {'masterKey': key})
    return CosmosClient(endpoint, DefaultAzureCredential())

def _connect_to_cosmos_container(container:str, db:str = None, endpoint:str = None) -> ContainerProxy:
    """
    Connect to an existing container, the access config is only ever read so nothing is created here.
    """
    if not endpoint:
        endpoint = os.environ.get('COSMOS_ENDPOINT', os.environ.get('COSMOS_ACCOUNT_HOST', None))
    if not endpoint:
        raise ValueError("CosmosDB endpoint was not provided and default endpoint not found in environment [COSMOS_ENDPOINT]")

    if not db:
        db = os.environ.get('COSMOS_DB', None)
    if not db:
        raise ValueError("CosmosDB database was not provided and default database not found in environment [COSMOS_DB]")
    if not container:
        raise ValueError("CosmosDB container was not provided")

    cache_key = f"{endpoint}/{db}/{container}"
    if CACHE_CONTAINER_CONNECTIONS and cache_key in CONTAINER_CONNECTIONS:
        return CONTAINER_CONNECTIONS[cache_key]

    client = _create_client(endpoint)
    try:
        connection = client.get_database_client(db).get_container_client(container)
        connection.read()
    except ResourceNotFoundError:
        raise ValueError(f"CosmosDB container {db}/{container} does not exist")
    except ClientAuthenticationError as e:
        raise ValueError(f"Failed to authenticate with CosmosDB: {e}")
    except HttpResponseError as e:
        if e.status_code == 403:
            raise ValueError(f"Failed to connect to CosmosDB container: {db}/{container}. Check your credentials.")
        raise e
    except ServiceRequestError as e:
        raise ValueError(f"Failed to connect to CosmosDB: {e}")

    ## Cache the Connection if needed
    if CACHE_CONTAINER_CONNECTIONS:
        CONTAINER_CONNECTIONS[cache_key] = connection

    return connection

class CosmosDBConnection:
    """
    A read connection to a container in a CosmosDB database.
    """
    _endpoint: str
    _database: str
    _container: str
    _container_client: ContainerProxy

    def __init__(self, container_name: str, database_name: str = None, endpoint: str = None):
        self._endpoint = endpoint
        self._database = database_name
        self._container = container_name
        self._container_client = None

    def connect(self):
        if self._container_client is None:
            self._container_client = _connect_to_cosmos_container(self._container, self._database, self._endpoint)
        if not self._container_client:
            raise ValueError(f"Failed to connect to CosmosDB container: {self._container}")
        return self

    def get_item(self, id:str, partitionKey:str = None) -> CosmosDict|None:
        """
        Read a single document, returns None if it does not exist.
        """
        try:
            self.connect()  # Ensure the connection is established
            pk = partitionKey if partitionKey is not None else id
            return self._container_client.read_item(item=id, partition_key=pk)
        except CosmosResourceNotFoundError:
            return None
