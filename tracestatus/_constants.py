COMPONENT_NAME = 'tracestatus'
DISTRIBUTION_NAME = 'tracestatus'

LOG_STDOUT_ENV_VAR = 'TRACESTATUS_LOG_STDOUT'
LOG_LEVEL_ENV_VAR = 'TRACESTATUS_LOG_LEVEL'

OK_DESCRIPTION = 'Not an error; returned on success.'
