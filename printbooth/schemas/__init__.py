from printbooth.schemas.accounts import BoothManagerLogin, PaperCountUpdate, SignupRequest
