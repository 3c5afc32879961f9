"""Solutions to CSES problem-set tasks and a command line for some of them."""